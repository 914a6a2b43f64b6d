"""
Filter Descriptors.

A filter descriptor is the immutable runtime object for one configured
filter: which request parameter it reads, which document field it targets,
its type specific options and its relations to other filters. The search
layer turns descriptors into query modifications; nothing here executes a
search.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field

from filter_manager.config.models import SortOption
from filter_manager.constants import RELATION_TYPES, URL_TYPES
from filter_manager.domain.relations import Relation


class FilterDescriptor(BaseModel):
    """Base shape shared by every filter type."""

    type: str
    request_field: str
    field: Optional[str] = None
    search_include: Optional[Relation] = None
    search_exclude: Optional[Relation] = None
    reset_include: Optional[Relation] = None
    reset_exclude: Optional[Relation] = None

    model_config = {"frozen": True, "extra": "forbid"}

    def relation(self, url_type: str, relation_type: str) -> Optional[Relation]:
        """
        Get the relation slot for a url type and relation type.

        Args:
            url_type: "search" or "reset"
            relation_type: "include" or "exclude"

        Raises:
            ValueError: If either argument names an unknown slot
        """
        if url_type not in URL_TYPES or relation_type not in RELATION_TYPES:
            raise ValueError(f"Unknown relation slot: {url_type}/{relation_type}")
        return getattr(self, f"{url_type}_{relation_type}")

    def is_related(self, url_type: str, filter_name: str) -> bool:
        """
        Check whether another filter participates in this filter's url.

        An unset slot does not restrict; both slots of the url type must
        admit the filter.
        """
        for relation_type in RELATION_TYPES:
            relation = self.relation(url_type, relation_type)
            if relation is not None and not relation.is_related(filter_name):
                return False
        return True


class PagerFilter(FilterDescriptor):
    """Splits results into pages."""

    count_per_page: int = Field(default=10, ge=1)
    max_pages: int = Field(default=8, ge=1)


class ChoiceFilter(FilterDescriptor):
    """Restricts results to one of the values of a field."""

    choices: Tuple[str, ...] = ()
    sort_options: Tuple[SortOption, ...] = ()


class MultiChoiceFilter(ChoiceFilter):
    """Restricts results to any of several selected values."""


class SortFilter(FilterDescriptor):
    """Orders results; no sort options means backend relevance order."""

    sort_options: Tuple[SortOption, ...] = ()

    @property
    def default_sort(self) -> Optional[SortOption]:
        """Sort option flagged as default, else the first one."""
        for option in self.sort_options:
            if option.default:
                return option
        return self.sort_options[0] if self.sort_options else None


class RangeFilter(FilterDescriptor):
    """Restricts a numeric field to a range."""


class DateRangeFilter(FilterDescriptor):
    """Restricts a date field to a range."""


class MatchFilter(FilterDescriptor):
    """Full text match on a field."""


class FuzzyFilter(FilterDescriptor):
    """Fuzzy match on a field."""


class FieldValueFilter(FilterDescriptor):
    """Restricts a field to a fixed value taken from the request."""


class DocumentValueFilter(FilterDescriptor):
    """Restricts a field to a value taken from the current document."""
