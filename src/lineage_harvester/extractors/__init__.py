# src/lineage_harvester/extractors/__init__.py
# Read extraction: recognize read nodes and normalize them into ReadCommands.

"""
Extractors turn opaque plan nodes into ReadCommand records.

This module provides:
- Relation matchers, one per supported read variant
- An ordered matcher registry
- ReadCommandExtractor, the classifier and normalizer entry point
"""

from lineage_harvester.extractors.base import (
    LogicalRelationMatcher,
    RelationMatcher,
    VariantMatch,
)
from lineage_harvester.extractors.kafka import KafkaTopicResolver, TopicResolver
from lineage_harvester.extractors.read_command import ReadCommandExtractor, default_matchers
from lineage_harvester.extractors.registry import MatcherRegistry

__all__ = [
    "KafkaTopicResolver",
    "LogicalRelationMatcher",
    "MatcherRegistry",
    "ReadCommandExtractor",
    "RelationMatcher",
    "TopicResolver",
    "VariantMatch",
    "default_matchers",
]
