"""
Unit Tests for validate_filter_names.

Test Aspects Covered:
    ✅ Business Logic: Uniqueness across all filter types
    ✅ Error Handling: First duplicate reported with its type
"""

from __future__ import annotations

import pytest

from filter_manager.compiler.name_validator import validate_filter_names
from filter_manager.errors import ConfigurationError, DuplicateNameError


class TestValidateFilterNames:
    """Test cases for filter name validation."""

    def test_unique_names_pass(self) -> None:
        """
        SCENARIO: Every filter name is unique
        EXPECTED: No exception
        """
        filters = {
            "choice": {"color": {}, "size": {}},
            "range": {"price": {}},
        }

        validate_filter_names(filters)

    def test_duplicate_across_types_rejected(self) -> None:
        """
        SCENARIO: Same name used under two different types
        EXPECTED: DuplicateNameError naming the second type
        """
        filters = {
            "choice": {"price": {}},
            "range": {"price": {}},
        }

        with pytest.raises(DuplicateNameError) as exc_info:
            validate_filter_names(filters)

        assert exc_info.value.name == "price"
        assert exc_info.value.filter_type == "range"
        assert "Found duplicate filter name `price` in `range` filter" in str(
            exc_info.value
        )

    def test_first_duplicate_reported(self) -> None:
        """
        SCENARIO: Two different names are duplicated
        EXPECTED: The first one found in configuration order is reported
        """
        filters = {
            "choice": {"color": {}, "size": {}},
            "match": {"size": {}},
            "fuzzy": {"color": {}},
        }

        with pytest.raises(DuplicateNameError) as exc_info:
            validate_filter_names(filters)

        assert exc_info.value.name == "size"
        assert exc_info.value.filter_type == "match"

    def test_empty_config_passes(self) -> None:
        """
        SCENARIO: No filters configured
        EXPECTED: No exception
        """
        validate_filter_names({})
        validate_filter_names({"choice": {}})

    def test_is_configuration_error(self) -> None:
        """DuplicateNameError is a ConfigurationError."""
        with pytest.raises(ConfigurationError):
            validate_filter_names({"a": {"x": {}}, "b": {"x": {}}})
