"""
Configuration Package - Models and Loaders.

This package handles the configuration side of the Filter Manager:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Merging of several configuration documents

Configuration Structure:
    - FilterManagerConfig: Root configuration object
    - FilterConfig: One filter (request_field, field, type options, relations)
    - RelationsConfig: search/reset include/exclude filter names
    - ManagerConfig: Ordered filter names plus repository reference

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Later documents override earlier ones
"""

from filter_manager.config.loader import ConfigLoader, load_config
from filter_manager.config.models import (
    FilterConfig,
    FilterManagerConfig,
    ManagerConfig,
    RelationScopeConfig,
    RelationsConfig,
    SortOption,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "FilterConfig",
    "FilterManagerConfig",
    "ManagerConfig",
    "RelationScopeConfig",
    "RelationsConfig",
    "SortOption",
]
