"""
Filter Descriptor Builder.

Turns one configured filter into the descriptor shape registered for its
type. Options are passed to the shape only when configured, so unset
options keep the shape's defaults:

    1. request_field always
    2. field, count_per_page, max_pages, choices when not None
    3. sort when present and non-empty (an empty list means "not configured")
    4. search/reset x include/exclude relations when non-empty

The builder does not register what it builds.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from filter_manager.compiler.relation_resolver import RelationResolver
from filter_manager.config.models import FilterConfig
from filter_manager.constants import RELATION_TYPES, URL_TYPES
from filter_manager.domain.filters import FilterDescriptor
from filter_manager.errors import FilterOptionError, UnknownFilterTypeError
from filter_manager.registry.filter_types import FilterTypeRegistry

logger = logging.getLogger(__name__)

# Options set only when present in config
OPTIONAL_SETTINGS = ("field", "count_per_page", "max_pages", "choices")


class FilterDescriptorBuilder:
    """Builds filter descriptors from filter configuration."""

    def __init__(
        self,
        filter_types: FilterTypeRegistry,
        relation_resolver: Optional[RelationResolver] = None,
    ) -> None:
        """
        Initialize builder.

        Args:
            filter_types: Registry of descriptor shapes
            relation_resolver: Resolver for relation config
        """
        self._filter_types = filter_types
        self._relation_resolver = relation_resolver or RelationResolver()

    def build(
        self,
        filter_type: str,
        name: str,
        config: Union[FilterConfig, Dict[str, Any]],
    ) -> FilterDescriptor:
        """
        Build the descriptor of one filter.

        Args:
            filter_type: Type key of the filter
            name: Filter name, used in error context
            config: Filter configuration

        Returns:
            Descriptor of the shape registered for filter_type

        Raises:
            UnknownFilterTypeError: If no shape is registered for the type
            FilterOptionError: If the shape rejects a configured option
        """
        if not isinstance(config, FilterConfig):
            config = FilterConfig.model_validate(config)

        if filter_type not in self._filter_types:
            raise UnknownFilterTypeError(filter_type, name)
        shape = self._filter_types.get(filter_type)

        options: Dict[str, Any] = {
            "type": filter_type,
            "request_field": config.request_field,
        }
        for setting in OPTIONAL_SETTINGS:
            value = getattr(config, setting)
            if value is not None:
                options[setting] = value

        if config.sort:
            options["sort_options"] = config.sort

        for url_type in URL_TYPES:
            scope = getattr(config.relations, url_type)
            for relation_type in RELATION_TYPES:
                targets = getattr(scope, relation_type)
                if targets:
                    options[f"{url_type}_{relation_type}"] = (
                        self._relation_resolver.resolve(relation_type, targets)
                    )

        try:
            descriptor = shape.model_validate(options)
        except ValidationError as e:
            raise FilterOptionError(name, filter_type, _format_errors(e)) from e

        logger.debug(f"Built filter '{name}' as {shape.__name__}")
        return descriptor


def _format_errors(error: ValidationError) -> str:
    """Flatten pydantic errors into one line."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
