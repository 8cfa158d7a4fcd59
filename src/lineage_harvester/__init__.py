# src/lineage_harvester/__init__.py
# Main package init - exports public API of the lineage harvester.

"""
Lineage harvester: normalizes the read operations of a data job into
ReadCommand records and ships execution plans and events to a lineage
collector over HTTP.

CLI Usage:
    harvester init                 # Write a local configuration file
    harvester status               # Probe the collector's readiness
"""

__version__ = "0.1.0"

from lineage_harvester.core.config import HarvesterConfig, load_config
from lineage_harvester.exceptions import (
    ExtractionError,
    HarvesterError,
    ProducerNotInitializedError,
    UnsupportedRelationError,
)
from lineage_harvester.extractors import ReadCommandExtractor
from lineage_harvester.models import (
    ExecutionEvent,
    ExecutionPlan,
    ReadCommand,
    SourceIdentifier,
    VariantKind,
)
from lineage_harvester.qualifier import DefaultPathQualifier, PathQualifier

__all__ = [
    # Records
    "ExecutionEvent",
    "ExecutionPlan",
    "ReadCommand",
    "SourceIdentifier",
    "VariantKind",
    # Extraction
    "DefaultPathQualifier",
    "PathQualifier",
    "ReadCommandExtractor",
    # Configuration
    "HarvesterConfig",
    "load_config",
    # Errors
    "ExtractionError",
    "HarvesterError",
    "ProducerNotInitializedError",
    "UnsupportedRelationError",
]
