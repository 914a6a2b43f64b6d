"""Identifiers shared by the compiler and the service registry adapter."""

DEFAULT_NAMESPACE = "ongr_filter_manager"

# Tag under which managers are discoverable by the search layer
MANAGER_TAG = "es.filter_manager"

URL_TYPES = ("search", "reset")
RELATION_TYPES = ("include", "exclude")


def filter_service_id(filter_name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Format the registry identifier of a filter."""
    return f"{namespace}.filter.{filter_name}"


def manager_service_id(manager_name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Format the registry identifier of a filter manager."""
    return f"{namespace}.{manager_name}"
