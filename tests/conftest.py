# tests/conftest.py
# Pytest configuration and fixtures for lineage-harvester tests.

"""
Shared pytest fixtures for testing the library.

Provides:
- Stand-ins for add-on relations (JDBC, Kafka, Excel) carrying the same
  fully-qualified type names as the real connector classes
- A fake Kafka broker whose consumers record being closed
- Path qualifier, session, and extractor instances
"""

from dataclasses import dataclass
from pathlib import Path

import pytest

from lineage_harvester.core.config import clear_config_cache
from lineage_harvester.extractors import KafkaTopicResolver, ReadCommandExtractor
from lineage_harvester.plan import BaseRelation
from lineage_harvester.qualifier import DefaultPathQualifier
from lineage_harvester.session import WarehouseSession

JDBC_MODULE = "org.apache.spark.sql.execution.datasources.jdbc"
KAFKA_MODULE = "org.apache.spark.sql.kafka010"
EXCEL_MODULE = "com.crealytics.spark.excel"


# ============== JDBC ==============


class JDBCOptions:
    __module__ = JDBC_MODULE

    def __init__(self, url: str, table: str, parameters: dict[str, str]) -> None:
        self.url = url
        self.parameters = parameters
        self._table = table

    def table(self) -> str:
        return self._table


class QueryJDBCOptions:
    """Options of connector releases where `table` became `table_or_query`."""

    __module__ = JDBC_MODULE

    def __init__(self, url: str, table_or_query: str, parameters: dict[str, str]) -> None:
        self.url = url
        self.parameters = parameters
        self._table_or_query = table_or_query

    def table_or_query(self) -> str:
        return self._table_or_query


class JDBCRelation(BaseRelation):
    __module__ = JDBC_MODULE

    def __init__(self, jdbc_options) -> None:
        self.jdbc_options = jdbc_options


# ============== Kafka ==============


@dataclass(frozen=True)
class TopicPartition:
    topic: str
    partition: int


class AssignStrategy:
    __module__ = KAFKA_MODULE

    def __init__(self, partitions: list[TopicPartition]) -> None:
        self.partitions = partitions


class SubscribeStrategy:
    __module__ = KAFKA_MODULE

    def __init__(self, topics: list[str]) -> None:
        self.topics = topics


class SubscribePatternStrategy:
    __module__ = KAFKA_MODULE

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern


class KafkaRelation(BaseRelation):
    __module__ = KAFKA_MODULE

    def __init__(
        self,
        strategy,
        source_options: dict[str, str],
        starting_offsets: str = "earliest",
        ending_offsets: str = "latest",
    ) -> None:
        self.strategy = strategy
        self.source_options = source_options
        self.starting_offsets = starting_offsets
        self.ending_offsets = ending_offsets


class FakeConsumer:
    def __init__(self, broker: "FakeBroker") -> None:
        self.broker = broker
        self.closed = False

    def topics(self) -> set[str]:
        if self.broker.fail:
            raise ConnectionError("broker went away")
        return set(self.broker.topics)

    def close(self) -> None:
        self.closed = True


class FakeBroker:
    """Consumer factory for KafkaTopicResolver recording every consumer it hands out."""

    def __init__(self, topics: set[str], fail: bool = False) -> None:
        self.topics = topics
        self.fail = fail
        self.consumers: list[FakeConsumer] = []
        self.connected_to: list[str] = []

    def __call__(self, bootstrap_servers: str) -> FakeConsumer:
        self.connected_to.append(bootstrap_servers)
        consumer = FakeConsumer(self)
        self.consumers.append(consumer)
        return consumer


# ============== Excel ==============


class WorkbookReader:
    __module__ = EXCEL_MODULE

    def __init__(self, input_stream_provider) -> None:
        self.input_stream_provider = input_stream_provider


class DefaultWorkbookReader:
    __module__ = EXCEL_MODULE

    def __init__(self, input_stream_provider) -> None:
        self.__input_stream_provider = input_stream_provider


class StreamingWorkbookReader:
    __module__ = EXCEL_MODULE

    def __init__(self, input_stream_provider) -> None:
        self.__input_stream_provider = input_stream_provider


@dataclass
class CellRangeAddressDataLocator:
    data_address: str = "'Sheet1'!A1"
    max_rows: int = 100


class ExcelRelation(BaseRelation):
    __module__ = EXCEL_MODULE

    def __init__(self, workbook_reader, data_locator, header: bool = True) -> None:
        self.workbook_reader = workbook_reader
        self.data_locator = data_locator
        self.header = header


# ============== Fixtures ==============


@pytest.fixture(autouse=True)
def _clear_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def qualifier() -> DefaultPathQualifier:
    return DefaultPathQualifier("hdfs://nn:8020", working_dir="/user/etl")


@pytest.fixture
def session() -> WarehouseSession:
    return WarehouseSession("hdfs://nn:8020/warehouse")


@pytest.fixture
def broker() -> FakeBroker:
    return FakeBroker({"ev-1", "ev-2", "other"})


@pytest.fixture
def extractor(qualifier, session, broker) -> ReadCommandExtractor:
    return ReadCommandExtractor(
        qualifier, session, topic_resolver=KafkaTopicResolver(consumer_factory=broker)
    )


@pytest.fixture
def workbook(tmp_path: Path) -> Path:
    """A file standing in for an Excel workbook."""
    path = tmp_path / "report.xlsx"
    path.write_bytes(b"PK\x03\x04")
    return path
