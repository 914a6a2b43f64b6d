"""
Unit Tests for FiltersContainer and FilterManager.

Tests:
    - Ordered lookups
    - Relation based filter selection
    - Repository binding
"""

from __future__ import annotations

import pytest

from filter_manager.adapters.service_registry import InMemoryServiceRegistry
from filter_manager.domain.filters import ChoiceFilter, PagerFilter, RangeFilter
from filter_manager.domain.manager import (
    FilterManager,
    FiltersContainer,
    RepositoryReference,
)
from filter_manager.domain.relations import Relation, RelationKind


@pytest.fixture
def container() -> FiltersContainer:
    """Container of three filters; category resets only price."""
    category = ChoiceFilter(
        type="choice",
        request_field="cat",
        reset_include=Relation(kind=RelationKind.INCLUDE, targets=frozenset({"price"})),
        search_exclude=Relation(kind=RelationKind.EXCLUDE, targets=frozenset({"pager"})),
    )
    price = RangeFilter(type="range", request_field="price")
    pager = PagerFilter(type="pagination", request_field="page")
    return FiltersContainer(
        items=(("category", category), ("price", price), ("pager", pager))
    )


class TestFiltersContainer:
    """Test cases for the ordered collection."""

    def test_lookup(self, container: FiltersContainer) -> None:
        assert container.get("price").request_field == "price"
        assert container.get("nope") is None
        assert "pager" in container
        assert "nope" not in container
        assert len(container) == 3

    def test_related_to_reset(self, container: FiltersContainer) -> None:
        """
        SCENARIO: category has reset include [price]
        EXPECTED: Only price takes part in category's reset url
        """
        related = container.related_to("category", "reset")

        assert [name for name, _ in related] == ["price"]

    def test_related_to_search(self, container: FiltersContainer) -> None:
        """
        SCENARIO: category has search exclude [pager]
        EXPECTED: Every filter but pager, in container order
        """
        related = container.related_to("category", "search")

        assert [name for name, _ in related] == ["category", "price"]

    def test_related_to_without_relations(self, container: FiltersContainer) -> None:
        """A filter without relations relates every filter."""
        related = container.related_to("price", "reset")

        assert [name for name, _ in related] == ["category", "price", "pager"]

    def test_related_to_unknown_filter(self, container: FiltersContainer) -> None:
        with pytest.raises(KeyError):
            container.related_to("nope", "search")


class TestFilterManagerBinding:
    """Test cases for resolving the repository reference."""

    def test_bind_resolves_repository(self, container: FiltersContainer) -> None:
        """
        SCENARIO: Repository registered in the service registry
        EXPECTED: Bound manager holds the live repository and same filters
        """
        repository = object()
        registry = InMemoryServiceRegistry()
        registry.register("repo.product", repository)
        manager = FilterManager(
            name="catalog",
            filters=container,
            repository=RepositoryReference("repo.product"),
        )

        bound = manager.bind(registry)

        assert bound.repository is repository
        assert bound.filters is container
        assert bound.name == "catalog"

    def test_bind_unknown_repository(self, container: FiltersContainer) -> None:
        manager = FilterManager(
            name="catalog",
            filters=container,
            repository=RepositoryReference("repo.missing"),
        )

        with pytest.raises(KeyError):
            manager.bind(InMemoryServiceRegistry())
