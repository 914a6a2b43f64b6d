"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic, so a malformed
document (missing request_field, wrong value types, unknown keys) fails
before the compiler builds a single object.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator


class SortOption(BaseModel):
    """One selectable sort order."""

    field: str
    order: Literal["asc", "desc"] = "asc"
    label: Optional[str] = None
    default: bool = False

    model_config = {"frozen": True, "extra": "forbid"}


class RelationScopeConfig(BaseModel):
    """Include/exclude filter names for one url type."""

    include: List[str] = Field(default_factory=list)
    exclude: List[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def _empty_node_as_list(cls, value: Any) -> Any:
        """An empty YAML node means no names."""
        return [] if value is None else value


class RelationsConfig(BaseModel):
    """Relations of a filter to other filters, per url type."""

    search: RelationScopeConfig = Field(default_factory=RelationScopeConfig)
    reset: RelationScopeConfig = Field(default_factory=RelationScopeConfig)

    model_config = {"extra": "forbid"}

    @field_validator("search", "reset", mode="before")
    @classmethod
    def _empty_node_as_scope(cls, value: Any) -> Any:
        return {} if value is None else value


class FilterConfig(BaseModel):
    """Configuration of a single filter."""

    request_field: str = Field(..., min_length=1)
    field: Optional[str] = None
    count_per_page: Optional[StrictInt] = None
    max_pages: Optional[StrictInt] = None
    choices: Optional[List[str]] = None
    sort: Optional[List[SortOption]] = None
    relations: RelationsConfig = Field(default_factory=RelationsConfig)

    model_config = {"extra": "forbid"}

    @field_validator("relations", mode="before")
    @classmethod
    def _empty_node_as_relations(cls, value: Any) -> Any:
        return {} if value is None else value


class ManagerConfig(BaseModel):
    """Configuration of a filter manager."""

    filters: List[str] = Field(default_factory=list)
    repository: str = Field(..., min_length=1)

    model_config = {"extra": "forbid"}


class FilterManagerConfig(BaseModel):
    """Root configuration object."""

    filters: Optional[Dict[str, Dict[str, FilterConfig]]] = None
    managers: Optional[Dict[str, ManagerConfig]] = None

    model_config = {"extra": "forbid"}
