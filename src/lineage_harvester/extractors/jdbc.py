# src/lineage_harvester/extractors/jdbc.py
# Matcher for JDBC relations (tables and queries).

"""
JDBC relations come from an optional connector and are matched by type name.

Their options object is private state of the relation. The table-or-query
accessor was renamed between connector versions: `table` in older releases,
`table_or_query` once queries became readable too. Both are tried, in that
order.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from lineage_harvester.extractors.base import LogicalRelationMatcher, VariantMatch
from lineage_harvester.models import SourceIdentifier, VariantKind
from lineage_harvester.plan import JDBC_RELATION_TYPE, LogicalRelation
from lineage_harvester.reflect import TypeProbe, invoke_first, read_field

logger = logging.getLogger(__name__)

TABLE_OR_QUERY_ACCESSORS = ("table", "table_or_query")


class JdbcRelationMatcher(LogicalRelationMatcher):
    def __init__(self, type_name: str = JDBC_RELATION_TYPE) -> None:
        self.probe = TypeProbe(type_name)

    @property
    def kind(self) -> VariantKind:
        return VariantKind.JDBC

    def match_relation(self, relation: Any, operation: LogicalRelation) -> Optional[VariantMatch]:
        if self.probe(relation) is None:
            return None
        options = read_field(relation, "jdbc_options")
        url = read_field(options, "url", str)
        parameters = read_field(options, "parameters", Mapping)
        table_or_query = invoke_first(options, TABLE_OR_QUERY_ACCESSORS, str)
        logger.debug("JDBC read of %s from %s", table_or_query, url)
        return self.matched(SourceIdentifier.for_jdbc(url, table_or_query), operation, dict(parameters))
