# src/lineage_harvester/plan.py
# Logical plan node shapes produced by the upstream execution-graph walker.

"""
Node and relation types the extractor recognizes structurally.

The upstream walker builds these from the engine's logical plan. Relations
shipped by optional add-on components (JDBC, Kafka, Excel) have no type here:
they are recognized by the fully-qualified type names at the bottom of this
module, see lineage_harvester.reflect.probe.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


class BaseRelation:
    """Any physical relation that can sit under a LogicalRelation."""


@dataclass(frozen=True)
class LogicalRelation:
    """Plan node wrapping a physical relation."""

    relation: Any
    output: tuple[str, ...] = ()


@dataclass(frozen=True)
class FileIndex:
    """Root paths of a file-based relation."""

    root_paths: tuple[str, ...]


@dataclass(frozen=True)
class HadoopFsRelation(BaseRelation):
    """File-based relation (parquet, csv, json, ...)."""

    location: FileIndex
    file_format: Any
    options: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"HadoopFsRelation({self.file_format}, {list(self.location.root_paths)})"


@dataclass(frozen=True)
class XmlRelation(BaseRelation):
    """Relation reading a hierarchical markup document."""

    location: Optional[str]
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TableIdentifier:
    table: str
    database: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.database}.{self.table}" if self.database else self.table


@dataclass(frozen=True)
class CatalogTable:
    """Catalog metadata of a managed or external table."""

    identifier: TableIdentifier
    provider: Optional[str] = None
    location: Optional[str] = None
    properties: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HiveTableRelation:
    """Plan node reading a catalog table with no physical relation object."""

    table_meta: CatalogTable


# Relations of optional add-on components, matched by type name only.
JDBC_RELATION_TYPE = "org.apache.spark.sql.execution.datasources.jdbc.JDBCRelation"
KAFKA_RELATION_TYPE = "org.apache.spark.sql.kafka010.KafkaRelation"
EXCEL_RELATION_TYPE = "com.crealytics.spark.excel.ExcelRelation"
