# src/lineage_harvester/extractors/files.py
# Matchers for filesystem-backed relations (generic file formats and XML).

from typing import Any, Optional

from lineage_harvester.extractors.base import LogicalRelationMatcher, VariantMatch
from lineage_harvester.models import SourceIdentifier, VariantKind
from lineage_harvester.plan import HadoopFsRelation, LogicalRelation, XmlRelation

XML_FORMAT = "XML"


class FileRelationMatcher(LogicalRelationMatcher):
    """Relations over root paths with a file format (parquet, csv, ...)."""

    @property
    def kind(self) -> VariantKind:
        return VariantKind.FILE

    def match_relation(self, relation: Any, operation: LogicalRelation) -> Optional[VariantMatch]:
        if not isinstance(relation, HadoopFsRelation):
            return None
        source = SourceIdentifier.of(
            str(relation.file_format), *(str(p) for p in relation.location.root_paths)
        )
        return self.matched(source, operation, relation.options)


class XmlRelationMatcher(LogicalRelationMatcher):
    @property
    def kind(self) -> VariantKind:
        return VariantKind.XML

    def match_relation(self, relation: Any, operation: LogicalRelation) -> Optional[VariantMatch]:
        if not isinstance(relation, XmlRelation):
            return None
        locations = [relation.location] if relation.location is not None else []
        return self.matched(
            SourceIdentifier.of(XML_FORMAT, *locations), operation, relation.parameters
        )
