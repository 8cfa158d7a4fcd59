# src/lineage_harvester/extractors/base.py
# Base classes for relation matchers (one per read variant).

"""
A matcher recognizes one read variant and pulls its raw configuration out.

Matchers return a VariantMatch holding a raw SourceIdentifier (locations not
yet path-qualified) and the variant's parameter map, or None when the node is
not theirs. Matchers for relations wrapped in a LogicalRelation derive from
LogicalRelationMatcher and only see the unwrapped relation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from lineage_harvester.models import SourceIdentifier, VariantKind
from lineage_harvester.plan import LogicalRelation


@dataclass(frozen=True)
class VariantMatch:
    """Classifier output for one recognized read node."""

    kind: VariantKind
    source: SourceIdentifier
    operation: Any
    parameters: dict[str, Any] = field(default_factory=dict)


class RelationMatcher(ABC):
    """Recognizes one read variant among plan nodes."""

    @property
    @abstractmethod
    def kind(self) -> VariantKind:
        """Variant produced by this matcher."""
        ...

    @abstractmethod
    def match(self, operation: Any) -> Optional[VariantMatch]:
        """Return the variant match for `operation`, or None if it is not this variant."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value})"


class LogicalRelationMatcher(RelationMatcher):
    """Matcher for relations wrapped in a LogicalRelation node."""

    def match(self, operation: Any) -> Optional[VariantMatch]:
        if not isinstance(operation, LogicalRelation):
            return None
        return self.match_relation(operation.relation, operation)

    @abstractmethod
    def match_relation(self, relation: Any, operation: LogicalRelation) -> Optional[VariantMatch]:
        ...

    def matched(
        self,
        source: SourceIdentifier,
        operation: Any,
        parameters: Optional[dict[str, Any]] = None,
    ) -> VariantMatch:
        return VariantMatch(
            kind=self.kind,
            source=source,
            operation=operation,
            parameters=dict(parameters or {}),
        )
