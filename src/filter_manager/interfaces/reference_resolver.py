"""
Reference Resolver Protocol.

Resolves a bare identifier (e.g. a repository reference recorded by a
manager) into a live handle. The compiler only records identifiers; the
resolver belongs to the application's object registry.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ReferenceResolverProtocol(Protocol):
    """Abstract interface for identifier resolution."""

    def resolve(self, identifier: str) -> Any:
        """
        Return the object registered under an identifier.

        Raises:
            KeyError: If nothing is registered under the identifier
        """
        ...
