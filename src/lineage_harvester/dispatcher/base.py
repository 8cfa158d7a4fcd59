# src/lineage_harvester/dispatcher/base.py
# Interface every lineage dispatcher implements.

from abc import ABC, abstractmethod

from lineage_harvester.models import ExecutionEvent, ExecutionPlan


class LineageDispatcher(ABC):
    """Sends harvested lineage to a collector."""

    @abstractmethod
    def send_plan(self, plan: ExecutionPlan) -> str:
        """Send an execution plan, returning the collector's response body."""
        ...

    @abstractmethod
    def send_event(self, event: ExecutionEvent) -> None:
        """Send an execution event."""
        ...

    def ensure_producer_ready(self) -> None:
        """Raise ProducerNotInitializedError when the collector can't accept lineage."""

    def close(self) -> None:
        """Release any connections the dispatcher holds."""
