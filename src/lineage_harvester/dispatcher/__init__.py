# src/lineage_harvester/dispatcher/__init__.py
# Delivery of execution plans and events to the lineage collector.

from lineage_harvester.dispatcher.base import LineageDispatcher
from lineage_harvester.dispatcher.http import HttpLineageDispatcher, RESTResource

__all__ = ["HttpLineageDispatcher", "LineageDispatcher", "RESTResource"]
