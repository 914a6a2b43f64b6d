"""
Name Validator - Global Filter Name Uniqueness.

Filter names key the filter registry and the derived service identifiers,
so they must be unique across all filter types. The scan runs before any
descriptor is built.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Set

from filter_manager.errors import DuplicateNameError

logger = logging.getLogger(__name__)


def validate_filter_names(filters: Mapping[str, Mapping[str, Any]]) -> None:
    """
    Check that no two filters share a name.

    Types and names are scanned in configuration order; the first duplicate
    found is reported.

    Args:
        filters: Nested mapping type -> name -> filter config

    Raises:
        DuplicateNameError: On the first duplicate name
    """
    existing: Set[str] = set()

    for filter_type, named_filters in filters.items():
        for name in named_filters:
            if name in existing:
                raise DuplicateNameError(name, filter_type)
            existing.add(name)

    logger.debug(f"Validated {len(existing)} filter names")
