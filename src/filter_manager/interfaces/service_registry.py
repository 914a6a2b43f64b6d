"""
Service Registry Protocol.

Sink for compiled objects: filters and managers are registered under
derived identifiers, managers additionally under a discovery tag.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class ServiceRegistryProtocol(Protocol):
    """Abstract interface for the application-wide object registry."""

    def register(
        self,
        service_id: str,
        service: Any,
        tags: Optional[List[str]] = None,
    ) -> None:
        """Register an object under an identifier."""
        ...

    def resolve(self, identifier: str) -> Any:
        """Get the object registered under an identifier."""
        ...

    def find_tagged_ids(self, tag: str) -> List[str]:
        """List identifiers carrying a tag, in registration order."""
        ...
