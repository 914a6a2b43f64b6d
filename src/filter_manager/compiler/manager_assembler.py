"""
Manager Assembler.

Builds filter managers from manager configuration and the completed filter
registry. Each manager is an isolated unit: an unresolved filter name aborts
that manager only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from filter_manager.config.models import ManagerConfig
from filter_manager.domain.filters import FilterDescriptor
from filter_manager.domain.manager import (
    FilterManager,
    FilterPair,
    FiltersContainer,
    RepositoryReference,
)
from filter_manager.errors import UnresolvedFilterReferenceError

logger = logging.getLogger(__name__)


@dataclass
class AssemblyResult:
    """Managers built and managers skipped during assembly."""

    managers: Dict[str, FilterManager] = field(default_factory=dict)
    errors: Dict[str, UnresolvedFilterReferenceError] = field(default_factory=dict)

    @property
    def has_failures(self) -> bool:
        """Check if any manager was skipped."""
        return len(self.errors) > 0


class ManagerAssembler:
    """Assembles filter managers from configuration."""

    def assemble(
        self,
        name: str,
        config: Union[ManagerConfig, Dict[str, Any]],
        filters: Mapping[str, FilterDescriptor],
    ) -> FilterManager:
        """
        Build one manager.

        Descriptors are shared with the registry, not copied.

        Args:
            name: Manager name
            config: Manager configuration
            filters: Filter registry keyed by name

        Returns:
            FilterManager with filters in configured order

        Raises:
            UnresolvedFilterReferenceError: On the first unknown filter name
        """
        if not isinstance(config, ManagerConfig):
            config = ManagerConfig.model_validate(config)

        items: List[FilterPair] = []
        for filter_name in config.filters:
            descriptor = filters.get(filter_name)
            if descriptor is None:
                raise UnresolvedFilterReferenceError(name, filter_name)
            items.append((filter_name, descriptor))

        return FilterManager(
            name=name,
            filters=FiltersContainer(items=tuple(items)),
            repository=RepositoryReference(config.repository),
        )

    def assemble_all(
        self,
        managers: Mapping[str, Union[ManagerConfig, Dict[str, Any]]],
        filters: Mapping[str, FilterDescriptor],
    ) -> AssemblyResult:
        """
        Build every manager, skipping the ones that fail.

        Args:
            managers: Manager configuration keyed by name
            filters: Filter registry keyed by name

        Returns:
            AssemblyResult with built managers and per-manager errors
        """
        result = AssemblyResult()

        for name, config in managers.items():
            try:
                result.managers[name] = self.assemble(name, config, filters)
            except UnresolvedFilterReferenceError as e:
                logger.error(f"Skipping manager '{name}': {e.message}")
                result.errors[name] = e

        return result
