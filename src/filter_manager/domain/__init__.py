"""
Domain Package - Relations, Filter Descriptors and Managers.

Everything here is immutable once built, so compiled objects can be shared
read-only across request handling threads.
"""

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
from filter_manager.domain.manager import (
    BoundFilterManager,
    FilterManager,
    FiltersContainer,
    RepositoryReference,
)
from filter_manager.domain.relations import Relation, RelationKind

__all__ = [
    "ChoiceFilter",
    "DateRangeFilter",
    "DocumentValueFilter",
    "FieldValueFilter",
    "FilterDescriptor",
    "FuzzyFilter",
    "MatchFilter",
    "MultiChoiceFilter",
    "PagerFilter",
    "RangeFilter",
    "SortFilter",
    "BoundFilterManager",
    "FilterManager",
    "FiltersContainer",
    "RepositoryReference",
    "Relation",
    "RelationKind",
]
