# src/lineage_harvester/extractors/excel.py
# Matcher for spreadsheet (Excel) relations read through a workbook reader.

"""
Excel relations don't expose the file they read. The path is recovered from
the workbook reader's input stream provider, a private attribute whose stored
name differs between reader implementations.

Each known shape is a StreamProviderAdapter, tried in order until one works.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from lineage_harvester.exceptions import ExtractionError, FieldExtractionError
from lineage_harvester.extractors.base import LogicalRelationMatcher, VariantMatch
from lineage_harvester.models import SourceIdentifier, VariantKind
from lineage_harvester.plan import EXCEL_RELATION_TYPE, LogicalRelation
from lineage_harvester.reflect import TypeProbe, declared_fields, read_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamProviderAdapter:
    """Reads the input stream provider off one known reader shape."""

    field_name: str
    applies_to: str

    def provider(self, reader: Any) -> Callable[[], Any]:
        value = read_field(reader, self.field_name)
        if not callable(value):
            raise FieldExtractionError(
                f"Field '{self.field_name}' of {type(reader).__name__} is not callable"
            )
        return value


STREAM_PROVIDER_ADAPTERS = (
    StreamProviderAdapter("input_stream_provider", "current readers (public attribute)"),
    StreamProviderAdapter(
        "_DefaultWorkbookReader__input_stream_provider", "legacy DefaultWorkbookReader"
    ),
    StreamProviderAdapter(
        "_StreamingWorkbookReader__input_stream_provider", "legacy StreamingWorkbookReader"
    ),
)


def open_input_stream(reader: Any) -> Any:
    """Open the reader's input stream using the first adapter that fits."""
    for adapter in STREAM_PROVIDER_ADAPTERS:
        try:
            provider = adapter.provider(reader)
        except FieldExtractionError:
            continue
        logger.debug("Using stream provider of %s", adapter.applies_to)
        return provider()
    raise ExtractionError("Unable to extract Excel input stream")


def locator_parameters(locator: Any) -> dict[str, str]:
    """Every declared field of the data locator, string-converted, '' when unreadable."""
    params = {}
    for name in declared_fields(locator):
        try:
            params[name] = str(read_field(locator, name))
        except Exception:
            params[name] = ""
    return params


class ExcelRelationMatcher(LogicalRelationMatcher):
    def __init__(self, type_name: str = EXCEL_RELATION_TYPE) -> None:
        self.probe = TypeProbe(type_name)

    @property
    def kind(self) -> VariantKind:
        return VariantKind.EXCEL

    def match_relation(self, relation: Any, operation: LogicalRelation) -> Optional[VariantMatch]:
        if self.probe(relation) is None:
            return None
        stream = open_input_stream(read_field(relation, "workbook_reader"))
        try:
            path = read_field(stream, "name")
        finally:
            close = getattr(stream, "close", None)
            if callable(close):
                close()

        parameters: dict[str, Any] = locator_parameters(read_field(relation, "data_locator"))
        parameters["header"] = str(read_field(relation, "header"))
        return self.matched(SourceIdentifier.for_excel(str(path)), operation, parameters)
