"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest

from filter_manager.adapters.service_registry import InMemoryServiceRegistry
from filter_manager.compiler.config_compiler import ConfigCompiler
from filter_manager.registry.filter_types import (
    FilterTypeRegistry,
    default_filter_types,
)


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def override_config_path(fixtures_path: Path) -> Path:
    """Path to configuration overlay file."""
    return fixtures_path / "override_config.yaml"


@pytest.fixture
def filter_types() -> FilterTypeRegistry:
    """Registry with the standard filter types."""
    return default_filter_types()


@pytest.fixture
def compiler(filter_types: FilterTypeRegistry) -> ConfigCompiler:
    """Compiler with the standard filter types."""
    return ConfigCompiler(filter_types=filter_types)


@pytest.fixture
def service_registry() -> InMemoryServiceRegistry:
    """Empty service registry."""
    return InMemoryServiceRegistry()


@pytest.fixture
def config_dict() -> Dict[str, Any]:
    """Parsed configuration tree with two managers."""
    return {
        "filters": {
            "choice": {
                "category": {
                    "request_field": "cat",
                    "field": "categories.name",
                    "relations": {"reset": {"include": ["price"]}},
                },
            },
            "range": {
                "price": {"request_field": "price", "field": "price"},
            },
            "pagination": {
                "pager": {"request_field": "page", "count_per_page": 20},
            },
        },
        "managers": {
            "catalog": {
                "filters": ["category", "price", "pager"],
                "repository": "es.manager.default.product",
            },
            "listing": {
                "filters": ["pager"],
                "repository": "es.manager.default.product",
            },
        },
    }
