"""
Registry Module - Filter Type Lookup.

Components:
    - FilterTypeRegistry: type name -> descriptor shape
    - default_filter_types: registry with the standard filter types
"""

from filter_manager.registry.filter_types import (
    DEFAULT_FILTER_MAP,
    FilterTypeRegistry,
    default_filter_types,
)

__all__ = [
    "DEFAULT_FILTER_MAP",
    "FilterTypeRegistry",
    "default_filter_types",
]
