"""
Configuration Errors.

Every error raised while compiling a configuration derives from
ConfigurationError and carries enough context (filter name, type,
manager) to locate the offending configuration entry.
"""

from __future__ import annotations

from typing import Optional


class ConfigurationError(Exception):
    """Raised when a filter manager configuration cannot be compiled."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateNameError(ConfigurationError):
    """Two filters share a name, regardless of their types."""

    def __init__(self, name: str, filter_type: str) -> None:
        super().__init__(
            f"Found duplicate filter name `{name}` in `{filter_type}` filter"
        )
        self.name = name
        self.filter_type = filter_type


class UnknownFilterTypeError(ConfigurationError):
    """A configured filter type has no registered descriptor shape."""

    def __init__(self, filter_type: str, filter_name: Optional[str] = None) -> None:
        message = f"Unknown filter type `{filter_type}`"
        if filter_name is not None:
            message += f" for filter `{filter_name}`"
        super().__init__(message)
        self.filter_type = filter_type
        self.filter_name = filter_name


class FilterOptionError(ConfigurationError):
    """A filter sets an option its type does not accept or an invalid value."""

    def __init__(self, filter_name: str, filter_type: str, details: str) -> None:
        super().__init__(
            f"Invalid options for filter `{filter_name}` of type "
            f"`{filter_type}`: {details}"
        )
        self.filter_name = filter_name
        self.filter_type = filter_type
        self.details = details


class UnresolvedFilterReferenceError(ConfigurationError):
    """A manager references a filter name that was never built."""

    def __init__(self, manager_name: str, filter_name: str) -> None:
        super().__init__(
            f"Manager `{manager_name}` references unknown filter `{filter_name}`"
        )
        self.manager_name = manager_name
        self.filter_name = filter_name


class ServiceIdCollisionError(ConfigurationError):
    """A manager's derived identifier equals a filter's identifier."""

    def __init__(self, manager_name: str, service_id: str) -> None:
        super().__init__(
            f"Manager `{manager_name}` would be registered as `{service_id}`, "
            f"which is already a filter identifier"
        )
        self.manager_name = manager_name
        self.service_id = service_id
