# src/lineage_harvester/extractors/catalog.py
# Matcher for catalog tables read without a physical relation object.

from typing import Any, Optional

from lineage_harvester.extractors.base import RelationMatcher, VariantMatch
from lineage_harvester.models import SourceIdentifier, VariantKind
from lineage_harvester.plan import HiveTableRelation
from lineage_harvester.qualifier import PathQualifier
from lineage_harvester.session import CatalogSession


class CatalogTableMatcher(RelationMatcher):
    """
    Managed or external catalog tables.

    The identifier is built by SourceIdentifier.for_table, which qualifies the
    table location itself, so this kind is not path-qualified again later.
    """

    def __init__(self, path_qualifier: PathQualifier, session: CatalogSession) -> None:
        self.path_qualifier = path_qualifier
        self.session = session

    @property
    def kind(self) -> VariantKind:
        return VariantKind.CATALOG_TABLE

    def match(self, operation: Any) -> Optional[VariantMatch]:
        if not isinstance(operation, HiveTableRelation):
            return None
        source = SourceIdentifier.for_table(operation.table_meta, self.path_qualifier, self.session)
        return VariantMatch(kind=self.kind, source=source, operation=operation)
