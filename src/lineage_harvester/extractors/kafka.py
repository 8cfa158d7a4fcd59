# src/lineage_harvester/extractors/kafka.py
# Matcher for message-queue (Kafka) relations and live topic resolution.

"""
Kafka relations are matched by type name and read reflectively.

Which topics a relation reads depends on its consumer strategy:
- AssignStrategy: explicit topic partitions, topics taken from the partitions
- SubscribeStrategy: explicit topic list, used as-is
- SubscribePatternStrategy: a regex; the live broker is asked for all topics
  and those whose full name matches the pattern are kept

The pattern case is the only extraction path that talks to the network. It
goes through a TopicResolver so it can be replaced in tests.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from lineage_harvester.exceptions import ExtractionError, TopicResolutionError
from lineage_harvester.extractors.base import LogicalRelationMatcher, VariantMatch
from lineage_harvester.models import SourceIdentifier, VariantKind
from lineage_harvester.plan import KAFKA_RELATION_TYPE, LogicalRelation
from lineage_harvester.reflect import TypeProbe, read_field

logger = logging.getLogger(__name__)

ASSIGN_STRATEGY = TypeProbe("org.apache.spark.sql.kafka010.AssignStrategy")
SUBSCRIBE_STRATEGY = TypeProbe("org.apache.spark.sql.kafka010.SubscribeStrategy")
SUBSCRIBE_PATTERN_STRATEGY = TypeProbe("org.apache.spark.sql.kafka010.SubscribePatternStrategy")

BOOTSTRAP_SERVERS_OPTION = "kafka.bootstrap.servers"


@runtime_checkable
class TopicResolver(Protocol):
    def list_topics(self, bootstrap_servers: str) -> set[str]:
        """Return every topic available on the broker."""
        ...


def _default_consumer(bootstrap_servers: str) -> Any:
    from kafka import KafkaConsumer

    return KafkaConsumer(
        bootstrap_servers=[s.strip() for s in bootstrap_servers.split(",") if s.strip()],
        key_deserializer=bytes.decode,
        value_deserializer=bytes.decode,
    )


class KafkaTopicResolver:
    """
    Lists broker topics with a short-lived consumer.

    A consumer is created per call and closed before returning, whether the
    query succeeded or not.
    """

    def __init__(self, consumer_factory: Optional[Callable[[str], Any]] = None) -> None:
        self._consumer_factory = consumer_factory or _default_consumer

    def list_topics(self, bootstrap_servers: str) -> set[str]:
        logger.debug("Listing topics on %s", bootstrap_servers)
        try:
            consumer = self._consumer_factory(bootstrap_servers)
        except Exception as e:
            raise TopicResolutionError(f"Cannot connect to Kafka at {bootstrap_servers}") from e
        try:
            return set(consumer.topics())
        except Exception as e:
            raise TopicResolutionError(f"Cannot list topics on {bootstrap_servers}") from e
        finally:
            consumer.close()


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


class KafkaRelationMatcher(LogicalRelationMatcher):
    def __init__(
        self,
        topic_resolver: Optional[TopicResolver] = None,
        type_name: str = KAFKA_RELATION_TYPE,
    ) -> None:
        self.probe = TypeProbe(type_name)
        self.topic_resolver = topic_resolver or KafkaTopicResolver()

    @property
    def kind(self) -> VariantKind:
        return VariantKind.KAFKA

    def match_relation(self, relation: Any, operation: LogicalRelation) -> Optional[VariantMatch]:
        if self.probe(relation) is None:
            return None
        options = dict(read_field(relation, "source_options", Mapping))
        strategy = read_field(relation, "strategy")
        topics = self.topics(strategy, options)

        parameters: dict[str, Any] = {
            **options,
            "startingOffsets": read_field(relation, "starting_offsets"),
            "endingOffsets": read_field(relation, "ending_offsets"),
        }
        return self.matched(SourceIdentifier.for_kafka(*topics), operation, parameters)

    def topics(self, strategy: Any, options: Mapping[str, Any]) -> list[str]:
        """Resolve the topic names a consumer strategy reads."""
        if ASSIGN_STRATEGY(strategy) is not None:
            partitions = read_field(strategy, "partitions")
            return _unique([str(p.topic) for p in partitions])

        if SUBSCRIBE_STRATEGY(strategy) is not None:
            return [str(t) for t in read_field(strategy, "topics")]

        if SUBSCRIBE_PATTERN_STRATEGY(strategy) is not None:
            pattern = read_field(strategy, "pattern", str)
            servers = options.get(BOOTSTRAP_SERVERS_OPTION)
            if not servers:
                raise ExtractionError(
                    f"Cannot resolve topic pattern '{pattern}': "
                    f"option '{BOOTSTRAP_SERVERS_OPTION}' is not set"
                )
            compiled = re.compile(pattern)
            topics = sorted(
                t for t in self.topic_resolver.list_topics(servers) if compiled.fullmatch(t)
            )
            logger.debug("Pattern %r matched topics %s on %s", pattern, topics, servers)
            return topics

        raise ExtractionError(f"Kafka consumer strategy is not supported: {strategy}")
