# src/lineage_harvester/harvester.py
# Harvest orchestration: extract the reads of a job and ship them to the collector.

"""
LineageHarvester ties extraction to dispatch for one observed job.

The read nodes are extracted first; if any node fails extraction nothing is
sent, so the collector never receives a plan with missing reads.
"""

import logging
import platform
from typing import Any, Iterable, Optional

from lineage_harvester import __version__
from lineage_harvester.core.config import HarvesterConfig
from lineage_harvester.dispatcher import HttpLineageDispatcher, LineageDispatcher
from lineage_harvester.extractors import KafkaTopicResolver, ReadCommandExtractor
from lineage_harvester.models import ExecutionEvent, ExecutionPlan, ReadOperation
from lineage_harvester.qualifier import DefaultPathQualifier
from lineage_harvester.session import WarehouseSession

logger = logging.getLogger(__name__)


class LineageHarvester:
    def __init__(self, extractor: ReadCommandExtractor, dispatcher: LineageDispatcher) -> None:
        self.extractor = extractor
        self.dispatcher = dispatcher

    @classmethod
    def from_config(cls, config: HarvesterConfig) -> "LineageHarvester":
        """Wire the default collaborators from configuration."""
        qualifier = DefaultPathQualifier(config.default_fs, config.working_dir)
        extractor = ReadCommandExtractor(
            qualifier,
            WarehouseSession(config.warehouse_dir),
            topic_resolver=KafkaTopicResolver(),
            relation_types=config.relation_types,
        )
        return cls(extractor, HttpLineageDispatcher.from_config(config))

    def build_plan(self, name: str, operations: Iterable[Any]) -> ExecutionPlan:
        reads = [ReadOperation.from_command(c) for c in self.extractor.extract_all(operations)]
        return ExecutionPlan(
            name=name,
            reads=reads,
            system_info={
                "name": "lineage-harvester",
                "version": __version__,
                "python": platform.python_version(),
            },
        )

    def harvest(
        self, name: str, operations: Iterable[Any], error: Optional[str] = None
    ) -> ExecutionPlan:
        """
        Extract, send the plan, then send the execution event for it.

        The event refers to the plan id the collector returned, which need not
        be the id generated locally.
        """
        plan = self.build_plan(name, operations)
        logger.info("Harvested %d read(s) for '%s'", len(plan.reads), name)
        plan_id = self.dispatcher.send_plan(plan)
        self.dispatcher.send_event(ExecutionEvent(plan_id=plan_id, error=error))
        return plan

    def close(self) -> None:
        self.dispatcher.close()

    def __enter__(self) -> "LineageHarvester":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
