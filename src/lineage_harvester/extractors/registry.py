# src/lineage_harvester/extractors/registry.py
# Ordered registry of relation matchers.

"""
MatcherRegistry keeps the matchers the classifier tries, in order.

The order matters: the first matcher returning a VariantMatch wins. Each
variant kind can be registered at most once, which keeps the dispatcher a
closed set.
"""

from typing import Any, Iterator, Optional

from lineage_harvester.extractors.base import RelationMatcher, VariantMatch
from lineage_harvester.models import VariantKind


class MatcherRegistry:
    """Ordered, one-per-kind collection of relation matchers."""

    def __init__(self) -> None:
        self._matchers: dict[VariantKind, RelationMatcher] = {}

    def register(self, matcher: RelationMatcher) -> None:
        """Register a matcher after the existing ones."""
        if matcher.kind in self._matchers:
            raise ValueError(f"Matcher already registered for kind: {matcher.kind.value}")
        self._matchers[matcher.kind] = matcher

    def replace(self, matcher: RelationMatcher) -> None:
        """Swap the matcher of an already registered kind, keeping its position."""
        if matcher.kind not in self._matchers:
            raise ValueError(f"Unknown matcher kind: {matcher.kind.value}")
        self._matchers[matcher.kind] = matcher

    def get(self, kind: VariantKind) -> Optional[RelationMatcher]:
        return self._matchers.get(kind)

    def list_kinds(self) -> list[VariantKind]:
        return list(self._matchers.keys())

    def first_match(self, operation: Any) -> Optional[VariantMatch]:
        """Run matchers in order and return the first match."""
        for matcher in self._matchers.values():
            result = matcher.match(operation)
            if result is not None:
                return result
        return None

    def __iter__(self) -> Iterator[RelationMatcher]:
        return iter(self._matchers.values())

    def __len__(self) -> int:
        return len(self._matchers)

    def __contains__(self, kind: VariantKind) -> bool:
        return kind in self._matchers
