"""
Filter Type Registry - Type Name to Descriptor Shape.

Maps the filter type names used as keys of the `filters` configuration
section to the descriptor classes built for them.

Usage:
    registry = default_filter_types()
    registry.register("geo_distance", GeoDistanceFilter)

    shape = registry.get("pagination")  # PagerFilter
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Type

from filter_manager.domain.filters import (
    ChoiceFilter,
    DateRangeFilter,
    DocumentValueFilter,
    FieldValueFilter,
    FilterDescriptor,
    FuzzyFilter,
    MatchFilter,
    MultiChoiceFilter,
    PagerFilter,
    RangeFilter,
    SortFilter,
)
from filter_manager.errors import UnknownFilterTypeError

logger = logging.getLogger(__name__)

DEFAULT_FILTER_MAP: Dict[str, Type[FilterDescriptor]] = {
    "choice": ChoiceFilter,
    "multi_choice": MultiChoiceFilter,
    "match": MatchFilter,
    "fuzzy": FuzzyFilter,
    "sort": SortFilter,
    "pagination": PagerFilter,
    "pager": PagerFilter,
    "range": RangeFilter,
    "date_range": DateRangeFilter,
    "field_value": FieldValueFilter,
    "document_value": DocumentValueFilter,
}


class FilterTypeRegistry:
    """
    Registry of filter descriptor shapes keyed by type name.

    Populated once before compiling; the compiler only reads it.
    """

    def __init__(
        self,
        filter_map: Optional[Dict[str, Type[FilterDescriptor]]] = None,
    ) -> None:
        """
        Initialize registry.

        Args:
            filter_map: Initial type name -> descriptor class mapping
        """
        self._shapes: Dict[str, Type[FilterDescriptor]] = {}
        for type_name, shape in (filter_map or {}).items():
            self.register(type_name, shape)

    def register(self, type_name: str, shape: Type[FilterDescriptor]) -> None:
        """
        Register a descriptor shape for a type name.

        Args:
            type_name: Type key used in configuration
            shape: FilterDescriptor subclass

        Raises:
            ValueError: If the type name is taken
            TypeError: If shape is not a FilterDescriptor subclass
        """
        if type_name in self._shapes:
            raise ValueError(f"Filter type '{type_name}' is already registered.")
        if not (isinstance(shape, type) and issubclass(shape, FilterDescriptor)):
            raise TypeError(f"Filter type '{type_name}' must map to a FilterDescriptor")

        self._shapes[type_name] = shape
        logger.debug(f"Registered filter type: {type_name} -> {shape.__name__}")

    def get(self, type_name: str) -> Type[FilterDescriptor]:
        """
        Get the descriptor shape for a type name.

        Raises:
            UnknownFilterTypeError: If no shape is registered
        """
        shape = self._shapes.get(type_name)
        if shape is None:
            raise UnknownFilterTypeError(type_name)
        return shape

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._shapes

    def __iter__(self) -> Iterator[str]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)


def default_filter_types() -> FilterTypeRegistry:
    """Create a registry populated with the standard filter types."""
    return FilterTypeRegistry(DEFAULT_FILTER_MAP)
