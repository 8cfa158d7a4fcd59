# src/lineage_harvester/session.py
# Session collaborator used to locate managed catalog tables.

from typing import Protocol, runtime_checkable

from lineage_harvester.plan import TableIdentifier

DEFAULT_DATABASE = "default"


@runtime_checkable
class CatalogSession(Protocol):
    """Resolves where the catalog stores a table that declares no location."""

    def default_table_path(self, identifier: TableIdentifier) -> str:
        ...


class WarehouseSession:
    """
    Session backed by a warehouse directory.

    Tables of the default database live directly under the warehouse, other
    databases get a `<db>.db` directory.
    """

    def __init__(self, warehouse_dir: str) -> None:
        self.warehouse_dir = warehouse_dir.rstrip("/")

    def default_table_path(self, identifier: TableIdentifier) -> str:
        database = identifier.database or DEFAULT_DATABASE
        if database == DEFAULT_DATABASE:
            return f"{self.warehouse_dir}/{identifier.table}"
        return f"{self.warehouse_dir}/{database}.db/{identifier.table}"
