"""
Config Compiler - Configuration to Object Graph.

Runs the compile pipeline over a fully loaded configuration:

    configuration
        -> name validation (fail fast, nothing built)
        -> filter descriptors (+ relations), keyed by name
        -> managers assembled from the filter registry

Filter errors abort the whole load. Manager errors skip the failing manager
and are reported on the result. The compiler holds no process-wide state:
each call returns a fresh CompiledConfiguration which the caller registers
wherever it keeps application objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from filter_manager.compiler.descriptor_builder import FilterDescriptorBuilder
from filter_manager.compiler.manager_assembler import ManagerAssembler
from filter_manager.compiler.name_validator import validate_filter_names
from filter_manager.compiler.relation_resolver import RelationResolver
from filter_manager.config.loader import ConfigLoader
from filter_manager.config.models import FilterManagerConfig
from filter_manager.constants import (
    DEFAULT_NAMESPACE,
    MANAGER_TAG,
    filter_service_id,
    manager_service_id,
)
from filter_manager.domain.filters import FilterDescriptor
from filter_manager.domain.manager import FilterManager
from filter_manager.errors import ConfigurationError, ServiceIdCollisionError
from filter_manager.interfaces.service_registry import ServiceRegistryProtocol
from filter_manager.registry.filter_types import (
    FilterTypeRegistry,
    default_filter_types,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledConfiguration:
    """Read-only result of one compile run."""

    namespace: str = DEFAULT_NAMESPACE
    filters: Mapping[str, FilterDescriptor] = field(
        default_factory=lambda: MappingProxyType({})
    )
    managers: Mapping[str, FilterManager] = field(
        default_factory=lambda: MappingProxyType({})
    )
    errors: Mapping[str, ConfigurationError] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def filter_service_id(self, filter_name: str) -> str:
        return filter_service_id(filter_name, self.namespace)

    def manager_service_id(self, manager_name: str) -> str:
        return manager_service_id(manager_name, self.namespace)

    def service_definitions(self) -> Dict[str, Any]:
        """
        Map derived identifiers to built objects.

        Filters come first, then managers, each in configuration order.
        """
        definitions: Dict[str, Any] = {}
        for name, descriptor in self.filters.items():
            definitions[self.filter_service_id(name)] = descriptor
        for name, manager in self.managers.items():
            definitions[self.manager_service_id(name)] = manager
        return definitions

    def get(self, service_id: str) -> Any:
        """
        Get a built object by its derived identifier.

        Raises:
            KeyError: If no filter or manager maps to the identifier
        """
        return self.service_definitions()[service_id]

    def register_into(self, registry: ServiceRegistryProtocol) -> None:
        """
        Register every built object, tagging managers with MANAGER_TAG.

        Nothing is registered if any identifier is already taken.

        Args:
            registry: Application object registry

        Raises:
            ValueError: If the registry already holds one of the identifiers
        """
        taken = [
            service_id
            for service_id in self.service_definitions()
            if _is_registered(registry, service_id)
        ]
        if taken:
            raise ValueError(f"Services already registered: {taken}")

        for name, descriptor in self.filters.items():
            registry.register(self.filter_service_id(name), descriptor)
        for name, manager in self.managers.items():
            registry.register(
                self.manager_service_id(name), manager, tags=[MANAGER_TAG]
            )
        logger.info(
            f"Registered {len(self.filters)} filters and "
            f"{len(self.managers)} managers under '{self.namespace}'"
        )

    def raise_for_errors(self) -> None:
        """Re-raise the first recorded manager error, if any."""
        for error in self.errors.values():
            raise error


def _is_registered(registry: ServiceRegistryProtocol, service_id: str) -> bool:
    try:
        registry.resolve(service_id)
    except KeyError:
        return False
    return True


class ConfigCompiler:
    """Compiles filter manager configuration into filters and managers."""

    def __init__(
        self,
        filter_types: Optional[FilterTypeRegistry] = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        """
        Initialize compiler.

        Args:
            filter_types: Descriptor shapes by type name (default: standard types)
            namespace: Prefix of derived service identifiers
        """
        self.filter_types = filter_types or default_filter_types()
        self.namespace = namespace
        self._builder = FilterDescriptorBuilder(self.filter_types, RelationResolver())
        self._assembler = ManagerAssembler()

    def compile(
        self,
        config: Union[FilterManagerConfig, Dict[str, Any]],
    ) -> CompiledConfiguration:
        """
        Compile a configuration.

        Args:
            config: Validated config or parsed configuration tree

        Returns:
            CompiledConfiguration with filters, managers and manager errors

        Raises:
            ValidationError: If a parsed tree doesn't match the schema
            DuplicateNameError: If two filters share a name
            UnknownFilterTypeError: If a filter type has no registered shape
            FilterOptionError: If a filter shape rejects an option
        """
        if not isinstance(config, FilterManagerConfig):
            config = FilterManagerConfig.model_validate(config)

        filters = self._build_filters(config)

        managers: Dict[str, FilterManager] = {}
        errors: Dict[str, ConfigurationError] = {}
        if config.managers is not None:
            assembly = self._assembler.assemble_all(config.managers, filters)
            managers = assembly.managers
            errors.update(assembly.errors)
            self._drop_colliding_managers(filters, managers, errors)

        logger.info(
            f"Compiled {len(filters)} filters and {len(managers)} managers"
            + (f" ({len(errors)} managers skipped)" if errors else "")
        )
        return CompiledConfiguration(
            namespace=self.namespace,
            filters=MappingProxyType(filters),
            managers=MappingProxyType(managers),
            errors=MappingProxyType(errors),
        )

    def _drop_colliding_managers(
        self,
        filters: Mapping[str, FilterDescriptor],
        managers: Dict[str, FilterManager],
        errors: Dict[str, ConfigurationError],
    ) -> None:
        """Skip managers whose identifier equals a filter identifier."""
        filter_ids = {filter_service_id(name, self.namespace) for name in filters}
        for name in list(managers):
            service_id = manager_service_id(name, self.namespace)
            if service_id in filter_ids:
                error = ServiceIdCollisionError(name, service_id)
                logger.error(f"Skipping manager '{name}': {error.message}")
                del managers[name]
                errors[name] = error

    def _build_filters(self, config: FilterManagerConfig) -> Dict[str, FilterDescriptor]:
        """Validate names, then build every descriptor or none."""
        if config.filters is None:
            return {}

        validate_filter_names(config.filters)

        filters: Dict[str, FilterDescriptor] = {}
        for filter_type, named_filters in config.filters.items():
            for name, filter_config in named_filters.items():
                filters[name] = self._builder.build(filter_type, name, filter_config)
        return filters


def compile_config(
    config: Union[FilterManagerConfig, Dict[str, Any]],
    filter_types: Optional[FilterTypeRegistry] = None,
    namespace: str = DEFAULT_NAMESPACE,
) -> CompiledConfiguration:
    """
    Convenience function to compile a configuration.

    Args:
        config: Validated config or parsed configuration tree
        filter_types: Descriptor shapes by type name
        namespace: Prefix of derived service identifiers

    Returns:
        CompiledConfiguration
    """
    return ConfigCompiler(filter_types=filter_types, namespace=namespace).compile(
        config
    )


def compile_file(
    *config_paths: Union[str, Path],
    filter_types: Optional[FilterTypeRegistry] = None,
    namespace: str = DEFAULT_NAMESPACE,
    base_path: Optional[Path] = None,
) -> CompiledConfiguration:
    """
    Load YAML configuration files and compile them.

    Args:
        config_paths: Paths to YAML config files, merged in order
        filter_types: Descriptor shapes by type name
        namespace: Prefix of derived service identifiers
        base_path: Base path for resolving relative paths

    Returns:
        CompiledConfiguration
    """
    config = ConfigLoader(base_path=base_path).load(*config_paths)
    return compile_config(config, filter_types=filter_types, namespace=namespace)
