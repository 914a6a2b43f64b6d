"""
Relation Value Objects.

A relation scopes which other filters participate when a filter builds its
search or reset url. Relations reference filters by name only and hold no
back-reference to the filter that owns them.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel


class RelationKind(str, Enum):
    """Mode of a relation."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


class Relation(BaseModel):
    """Named cross-reference from one filter to a set of other filters."""

    kind: RelationKind
    targets: FrozenSet[str]

    model_config = {"frozen": True}

    def is_related(self, filter_name: str) -> bool:
        """
        Check whether a filter falls under this relation.

        Include relations relate exactly their targets, exclude relations
        relate every filter except their targets.
        """
        if self.kind is RelationKind.INCLUDE:
            return filter_name in self.targets
        return filter_name not in self.targets
