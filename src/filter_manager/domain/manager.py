"""
Filter Managers.

A filter manager is an ordered, named collection of filters bound to one
data repository. Managers hold the repository by identifier; turning the
identifier into a live handle is a separate step (bind) performed against
an external resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Tuple

from filter_manager.domain.filters import FilterDescriptor

if TYPE_CHECKING:
    from filter_manager.interfaces.reference_resolver import (
        ReferenceResolverProtocol,
    )

FilterPair = Tuple[str, FilterDescriptor]


@dataclass(frozen=True)
class FiltersContainer:
    """Ordered (name, descriptor) pairs; order is query application order."""

    items: Tuple[FilterPair, ...] = ()

    def __iter__(self) -> Iterator[FilterPair]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, name: object) -> bool:
        return any(item_name == name for item_name, _ in self.items)

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.items]

    def get(self, name: str) -> Optional[FilterDescriptor]:
        """Get a filter by name, None if the container doesn't hold it."""
        for item_name, descriptor in self.items:
            if item_name == name:
                return descriptor
        return None

    def related_to(self, name: str, url_type: str) -> List[FilterPair]:
        """
        Get the filters taking part in a filter's search or reset url.

        Args:
            name: Filter whose relations decide
            url_type: "search" or "reset"

        Returns:
            Ordered pairs admitted by the filter's relations

        Raises:
            KeyError: If the container doesn't hold the filter
        """
        descriptor = self.get(name)
        if descriptor is None:
            raise KeyError(name)
        return [
            (item_name, item)
            for item_name, item in self.items
            if descriptor.is_related(url_type, item_name)
        ]


@dataclass(frozen=True)
class RepositoryReference:
    """Identifier of an external repository, resolved outside the compiler."""

    identifier: str

    def resolve(self, resolver: "ReferenceResolverProtocol") -> Any:
        return resolver.resolve(self.identifier)


@dataclass(frozen=True)
class FilterManager:
    """Named, ordered filter collection bound to a repository reference."""

    name: str
    filters: FiltersContainer
    repository: RepositoryReference

    def bind(self, resolver: "ReferenceResolverProtocol") -> "BoundFilterManager":
        """
        Resolve the repository reference into a live handle.

        Args:
            resolver: External registry resolving identifiers

        Returns:
            BoundFilterManager sharing this manager's filters
        """
        return BoundFilterManager(
            manager=self,
            repository=self.repository.resolve(resolver),
        )


@dataclass(frozen=True)
class BoundFilterManager:
    """Filter manager whose repository has been resolved."""

    manager: FilterManager
    repository: Any

    @property
    def name(self) -> str:
        return self.manager.name

    @property
    def filters(self) -> FiltersContainer:
        return self.manager.filters
