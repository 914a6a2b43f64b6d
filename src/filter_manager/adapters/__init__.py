"""
Adapters Package - Infrastructure Implementations.

    - InMemoryServiceRegistry: object registry and reference resolver
"""

from filter_manager.adapters.service_registry import (
    InMemoryServiceRegistry,
    ServiceEntry,
)

__all__ = [
    "InMemoryServiceRegistry",
    "ServiceEntry",
]
