# src/lineage_harvester/models.py
# Core Pydantic models for read commands, source identifiers, and collector payloads.

"""
Defines the records produced by the harvester:
- SourceIdentifier: canonical (format, locations) pair of a data source
- ReadCommand: normalized description of one read node in an execution plan
- ExecutionPlan / ExecutionEvent: payloads shipped to the lineage collector
"""

from __future__ import annotations

import time
import uuid
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from lineage_harvester.plan import CatalogTable
    from lineage_harvester.qualifier import PathQualifier
    from lineage_harvester.session import CatalogSession


class VariantKind(str, Enum):
    """Closed set of read variants the extractor understands."""

    FILE = "file"
    XML = "xml"
    JDBC = "jdbc"
    KAFKA = "kafka"
    EXCEL = "excel"
    CATALOG_TABLE = "catalog-table"

    @property
    def path_based(self) -> bool:
        """Whether locations of this kind are filesystem paths to be qualified."""
        return self in (VariantKind.FILE, VariantKind.XML, VariantKind.EXCEL)


class SourceIdentifier(BaseModel):
    """Where data was read from: a format tag plus ordered locations."""

    model_config = ConfigDict(frozen=True)

    format: str | None = None
    locations: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def of(cls, format: str | None, *locations: str) -> SourceIdentifier:
        return cls(format=format, locations=tuple(locations))

    @classmethod
    def for_jdbc(cls, connection_url: str, table_or_query: str) -> SourceIdentifier:
        return cls.of("jdbc", f"{connection_url}:{table_or_query}")

    @classmethod
    def for_kafka(cls, *topics: str) -> SourceIdentifier:
        return cls.of("kafka", *topics)

    @classmethod
    def for_excel(cls, path: str) -> SourceIdentifier:
        return cls.of("excel", path)

    @classmethod
    def for_table(
        cls,
        table: CatalogTable,
        path_qualifier: PathQualifier,
        session: CatalogSession,
    ) -> SourceIdentifier:
        """
        Identify a catalog table by its storage location.

        Managed tables without an explicit location live under the session's
        default table path.
        """
        uri = table.location or session.default_table_path(table.identifier)
        return cls.of(table.provider, path_qualifier.qualify(uri))

    def with_locations(self, locations: list[str]) -> SourceIdentifier:
        return self.model_copy(update={"locations": tuple(locations)})


class ReadCommand(BaseModel):
    """A recognized read: its source, the originating plan node, and extra parameters."""

    model_config = ConfigDict(frozen=True)

    source_identifier: SourceIdentifier
    operation: Any = Field(default=None, exclude=True, repr=False)
    parameters: dict[str, Any] = Field(default_factory=dict)

    # the originating node is identity, not content
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadCommand):
            return NotImplemented
        return (
            self.source_identifier == other.source_identifier
            and self.parameters == other.parameters
        )

    def __hash__(self) -> int:
        return hash(self.source_identifier)


class ReadOperation(BaseModel):
    """Serialized form of a ReadCommand inside an execution plan."""

    inputs: list[str]
    format: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_command(cls, command: ReadCommand) -> ReadOperation:
        source = command.source_identifier
        return cls(
            inputs=list(source.locations),
            format=source.format,
            parameters={k: _json_safe(v) for k, v in command.parameters.items()},
        )


class ExecutionPlan(BaseModel):
    """Logical description of one harvested job, as accepted by the collector."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    reads: list[ReadOperation] = Field(default_factory=list)
    system_info: dict[str, str] = Field(default_factory=dict)
    extra: dict[str, Any] = Field(default_factory=dict)


class ExecutionEvent(BaseModel):
    """Outcome of one execution of a plan."""

    plan_id: str
    timestamp: int = Field(default_factory=lambda: int(time.time() * 1000))
    error: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_json_safe(v) for v in value]
    return str(value)
