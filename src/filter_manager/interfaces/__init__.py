"""
Interfaces Package - Protocols for External Collaborators.

    - ReferenceResolverProtocol: identifier -> live object
    - ServiceRegistryProtocol: sink for compiled filters and managers
"""

from filter_manager.interfaces.reference_resolver import ReferenceResolverProtocol
from filter_manager.interfaces.service_registry import ServiceRegistryProtocol

__all__ = [
    "ReferenceResolverProtocol",
    "ServiceRegistryProtocol",
]
