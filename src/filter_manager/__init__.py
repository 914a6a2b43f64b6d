"""
Filter Manager - Declarative Search Filter Wiring.

Builds the runtime object graph of search filters and filter managers from a
configuration document. An application describes in YAML how request
parameters translate into query modifications (pagination, sorting, choice
faceting, ranges) and gets back validated, immutable filter descriptors
grouped into named managers.

Architecture:
    - Configuration validated at load time via Pydantic
    - Compiler pipeline: name validation, descriptor building, manager assembly
    - Two-phase repository resolution (identifiers first, live handles later)
    - Output handed to an external service registry

Main Components:
    - config: Configuration models and YAML loader
    - domain: Relations, filter descriptors, managers
    - registry: Filter type registry
    - compiler: Configuration-to-object-graph compiler
    - adapters: In-memory service registry

Example:
    >>> from filter_manager import compile_file
    >>> compiled = compile_file("config/filters.yaml")
    >>> manager = compiled.managers["catalog"]
    >>> [name for name, _ in manager.filters]
    ['category', 'price', 'pager']
"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Filter Manager.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import filter_manager
        >>> filter_manager.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("filter_manager").setLevel(level)


from filter_manager.compiler import (  # noqa: E402
    CompiledConfiguration,
    ConfigCompiler,
    compile_config,
    compile_file,
)
from filter_manager.errors import (  # noqa: E402
    ConfigurationError,
    DuplicateNameError,
    FilterOptionError,
    ServiceIdCollisionError,
    UnknownFilterTypeError,
    UnresolvedFilterReferenceError,
)

__all__ = [
    "configure_logging",
    "CompiledConfiguration",
    "ConfigCompiler",
    "compile_config",
    "compile_file",
    "ConfigurationError",
    "DuplicateNameError",
    "FilterOptionError",
    "ServiceIdCollisionError",
    "UnknownFilterTypeError",
    "UnresolvedFilterReferenceError",
]
