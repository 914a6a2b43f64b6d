"""Relation Resolver - Relation Config to Relation Values."""

from __future__ import annotations

from typing import Iterable, Union

from filter_manager.domain.relations import Relation, RelationKind


class RelationResolver:
    """
    Builds relation values from configured filter names.

    Targets are taken as given: they are not checked against the filters
    actually configured.
    """

    def resolve(
        self,
        relation_type: Union[str, RelationKind],
        targets: Iterable[str],
    ) -> Relation:
        """
        Build a relation.

        Args:
            relation_type: "include" or "exclude"
            targets: Names of related filters

        Returns:
            Relation of that kind over the target set

        Raises:
            ValueError: If relation_type is not a known kind
        """
        return Relation(kind=RelationKind(relation_type), targets=frozenset(targets))
