# src/lineage_harvester/extractors/read_command.py
# Turns read nodes of an execution plan into ReadCommand records.

"""
ReadCommandExtractor is the entry point of the extraction engine.

classify() runs the registered matchers over a plan node. normalize()
path-qualifies the raw locations of path-based variants and assembles the
ReadCommand. Nodes that are not reads yield None; a LogicalRelation over a
relation no matcher understands is an error, since dropping it would leave a
hole in the lineage.
"""

import logging
from typing import Any, Iterable, Iterator, Optional

from lineage_harvester.core.config import RelationTypes
from lineage_harvester.exceptions import UnsupportedRelationError
from lineage_harvester.extractors.base import VariantMatch
from lineage_harvester.extractors.catalog import CatalogTableMatcher
from lineage_harvester.extractors.excel import ExcelRelationMatcher
from lineage_harvester.extractors.files import FileRelationMatcher, XmlRelationMatcher
from lineage_harvester.extractors.jdbc import JdbcRelationMatcher
from lineage_harvester.extractors.kafka import KafkaRelationMatcher, TopicResolver
from lineage_harvester.extractors.registry import MatcherRegistry
from lineage_harvester.models import ReadCommand
from lineage_harvester.plan import LogicalRelation
from lineage_harvester.qualifier import PathQualifier
from lineage_harvester.session import CatalogSession

logger = logging.getLogger(__name__)


def default_matchers(
    path_qualifier: PathQualifier,
    session: CatalogSession,
    topic_resolver: Optional[TopicResolver] = None,
    relation_types: Optional[RelationTypes] = None,
) -> MatcherRegistry:
    """Build the registry of built-in matchers in classification order."""
    types = relation_types or RelationTypes()
    registry = MatcherRegistry()
    registry.register(FileRelationMatcher())
    registry.register(XmlRelationMatcher())
    registry.register(JdbcRelationMatcher(types.jdbc))
    registry.register(KafkaRelationMatcher(topic_resolver, types.kafka))
    registry.register(ExcelRelationMatcher(types.excel))
    registry.register(CatalogTableMatcher(path_qualifier, session))
    return registry


class ReadCommandExtractor:
    """
    Classifies plan nodes and normalizes recognized reads.

    The path qualifier and session are injected and are the only state shared
    between calls.
    """

    def __init__(
        self,
        path_qualifier: PathQualifier,
        session: CatalogSession,
        topic_resolver: Optional[TopicResolver] = None,
        relation_types: Optional[RelationTypes] = None,
        matchers: Optional[MatcherRegistry] = None,
    ) -> None:
        self.path_qualifier = path_qualifier
        self.session = session
        self.matchers = matchers or default_matchers(
            path_qualifier, session, topic_resolver, relation_types
        )

    def classify(self, operation: Any) -> Optional[VariantMatch]:
        """Recognize the read variant of `operation`, None if it is not a read."""
        match = self.matchers.first_match(operation)
        if match is not None:
            logger.debug("Recognized %s read: %s", match.kind.value, list(match.source.locations))
            return match
        if isinstance(operation, LogicalRelation):
            raise UnsupportedRelationError(operation.relation)
        return None

    def normalize(self, match: VariantMatch) -> ReadCommand:
        """Qualify path locations and assemble the ReadCommand."""
        source = match.source
        if match.kind.path_based:
            source = source.with_locations(
                [self.path_qualifier.qualify(loc) for loc in source.locations]
            )
        return ReadCommand(
            source_identifier=source,
            operation=match.operation,
            parameters=dict(match.parameters),
        )

    def as_read_command(self, operation: Any) -> Optional[ReadCommand]:
        match = self.classify(operation)
        return self.normalize(match) if match is not None else None

    def extract_all(self, operations: Iterable[Any]) -> Iterator[ReadCommand]:
        """Yield a ReadCommand for every read node, in order."""
        for operation in operations:
            command = self.as_read_command(operation)
            if command is not None:
                yield command
