# src/lineage_harvester/exceptions.py
# Exception hierarchy for the lineage harvester.

"""
All harvester failures derive from HarvesterError.

Extraction never suppresses errors: a node that is not a read yields None,
everything else that goes wrong is raised to the caller.
"""


class HarvesterError(RuntimeError):
    """Base class for all harvester errors."""


class ConfigurationError(HarvesterError):
    """Missing or invalid configuration."""


class UnsupportedRelationError(HarvesterError):
    """A read node wraps a relation none of the known variants handle."""

    def __init__(self, relation: object) -> None:
        super().__init__(f"Relation is not supported: {relation}")
        self.relation = relation


class ExtractionError(HarvesterError):
    """Raised when a value cannot be pulled out of an opaque relation."""


class FieldExtractionError(ExtractionError):
    """A named field is absent or has an unexpected type."""


class AccessorResolutionError(ExtractionError):
    """None of the candidate accessor names could be invoked."""


class TopicResolutionError(HarvesterError):
    """Listing topics on a message broker failed."""


class DispatchError(HarvesterError):
    """Sending lineage data to the collector failed."""


class ProducerNotInitializedError(HarvesterError):
    """
    The collector readiness probe failed.

    `connected` tells the two failure modes apart: True when the collector
    answered with a non-success status, False when it could not be reached.
    """

    def __init__(self, message: str, connected: bool) -> None:
        super().__init__(message)
        self.connected = connected
