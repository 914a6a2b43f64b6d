"""
Integration Test: YAML Documents to Bound Managers.

Tests:
    - Loading and compiling the sample configuration
    - Overlay documents
    - Repository binding through the service registry
"""

from __future__ import annotations

from pathlib import Path

from filter_manager import compile_file
from filter_manager.adapters.service_registry import InMemoryServiceRegistry
from filter_manager.config.models import SortOption
from filter_manager.constants import MANAGER_TAG
from filter_manager.domain.relations import RelationKind


class TestSampleConfiguration:
    """End-to-end tests over tests/fixtures/sample_config.yaml."""

    def test_compiles_sample(self, sample_config_path: Path) -> None:
        compiled = compile_file(sample_config_path)

        assert set(compiled.filters) == {"category", "price", "sorting", "pager"}
        assert compiled.managers["catalog"].filters.names == [
            "category",
            "price",
            "sorting",
            "pager",
        ]
        assert compiled.managers["search"].filters.names == ["pager", "sorting"]

    def test_filter_options(self, sample_config_path: Path) -> None:
        compiled = compile_file(sample_config_path)

        category = compiled.filters["category"]
        assert category.field == "categories.name"
        assert category.choices == ("shoes", "shirts", "hats")
        assert category.reset_include.kind is RelationKind.INCLUDE
        assert category.reset_include.targets == frozenset({"price"})

        sorting = compiled.filters["sorting"]
        assert sorting.default_sort == SortOption(
            field="price", order="asc", label="Cheapest", default=True
        )

        pager = compiled.filters["pager"]
        assert (pager.count_per_page, pager.max_pages) == (12, 5)

    def test_search_relation_selects_filters(self, sample_config_path: Path) -> None:
        """
        SCENARIO: price excludes pager from its search url
        EXPECTED: Catalog filters related to price lack the pager
        """
        compiled = compile_file(sample_config_path)

        related = compiled.managers["catalog"].filters.related_to("price", "search")

        assert [name for name, _ in related] == ["category", "price", "sorting"]

    def test_overlay_document(
        self, sample_config_path: Path, override_config_path: Path
    ) -> None:
        compiled = compile_file(sample_config_path, override_config_path)

        assert compiled.filters["pager"].count_per_page == 24
        assert compiled.managers["brands"].repository.identifier == (
            "es.manager.default.brand"
        )

    def test_register_and_bind(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Repositories registered, compiled config registered
        EXPECTED: Tagged managers bind to the live repositories
        """
        product_repository = object()
        registry = InMemoryServiceRegistry()
        registry.register("es.manager.default.product", product_repository)

        compile_file(sample_config_path).register_into(registry)

        manager_ids = registry.find_tagged_ids(MANAGER_TAG)
        assert manager_ids == [
            "ongr_filter_manager.catalog",
            "ongr_filter_manager.search",
        ]
        for manager_id in manager_ids:
            bound = registry.resolve(manager_id).bind(registry)
            assert bound.repository is product_repository
