"""
In-Memory Service Registry.

Thread-safe object registry used as the sink for compiled filters and
managers and as the resolver for repository references.

Usage:
    registry = InMemoryServiceRegistry()
    registry.register("app.repository.product", product_repository)

    compiled.register_into(registry)
    managers = registry.find_tagged_ids(MANAGER_TAG)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ServiceEntry:
    """A registered object and its tags."""

    service_id: str
    service: Any
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "service_id": self.service_id,
            "service_type": type(self.service).__name__,
            "tags": self.tags,
        }


class InMemoryServiceRegistry:
    """
    Thread-safe registry of objects keyed by identifier.

    Supports:
        - Registration with tags
        - Identifier resolution (ReferenceResolverProtocol)
        - Tag based discovery
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._services: Dict[str, ServiceEntry] = {}
        self._lock = RLock()
        logger.debug("InMemoryServiceRegistry initialized")

    def register(
        self,
        service_id: str,
        service: Any,
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register an object under an identifier.

        Args:
            service_id: Unique identifier
            service: Object to store
            tags: Optional tags for discovery

        Raises:
            ValueError: If the identifier is already registered
        """
        with self._lock:
            if service_id in self._services:
                raise ValueError(f"Service '{service_id}' is already registered.")

            self._services[service_id] = ServiceEntry(
                service_id=service_id,
                service=service,
                tags=list(tags or []),
            )
            logger.debug(f"Registered service: {service_id}")

    def resolve(self, identifier: str) -> Any:
        """
        Get the object registered under an identifier.

        Raises:
            KeyError: If nothing is registered under the identifier
        """
        with self._lock:
            entry = self._services.get(identifier)
            if entry is None:
                raise KeyError(f"Service '{identifier}' is not registered")
            return entry.service

    def has(self, identifier: str) -> bool:
        with self._lock:
            return identifier in self._services

    def find_tagged_ids(self, tag: str) -> List[str]:
        """List identifiers carrying a tag, in registration order."""
        with self._lock:
            return [
                service_id
                for service_id, entry in self._services.items()
                if tag in entry.tags
            ]

    def list_all(self) -> Dict[str, ServiceEntry]:
        with self._lock:
            return dict(self._services)

    @property
    def registered_count(self) -> int:
        """Total number of registered objects."""
        with self._lock:
            return len(self._services)
