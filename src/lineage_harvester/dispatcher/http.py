# src/lineage_harvester/dispatcher/http.py
# HTTP dispatcher posting lineage JSON to the collector REST API.

"""
HttpLineageDispatcher talks to a collector exposing three resources under a
base URL:

    POST <base>/execution-plans     one execution plan
    POST <base>/execution-events    a JSON array of execution events
    HEAD <base>/status              readiness probe

Usage:
    dispatcher = HttpLineageDispatcher("http://collector:8080/producer")
    dispatcher.ensure_producer_ready()
    plan_id = dispatcher.send_plan(plan)
"""

import logging
from typing import Optional

import httpx
from pydantic import TypeAdapter

from lineage_harvester.core.config import HarvesterConfig
from lineage_harvester.dispatcher.base import LineageDispatcher
from lineage_harvester.exceptions import (
    ConfigurationError,
    DispatchError,
    ProducerNotInitializedError,
)
from lineage_harvester.models import ExecutionEvent, ExecutionPlan

logger = logging.getLogger(__name__)

_EVENTS = TypeAdapter(list[ExecutionEvent])


class RESTResource:
    EXECUTION_PLANS = "execution-plans"
    EXECUTION_EVENTS = "execution-events"
    STATUS = "status"


class HttpLineageDispatcher(LineageDispatcher):
    """Dispatcher sending lineage to the collector over HTTP."""

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        logger.info("Producer URL is set to: '%s'", self.base_url)

        self.execution_plans_url = f"{self.base_url}/{RESTResource.EXECUTION_PLANS}"
        self.execution_events_url = f"{self.base_url}/{RESTResource.EXECUTION_EVENTS}"
        self.status_url = f"{self.base_url}/{RESTResource.STATUS}"

    @classmethod
    def from_config(
        cls, config: HarvesterConfig, client: Optional[httpx.Client] = None
    ) -> "HttpLineageDispatcher":
        if not config.producer_url:
            raise ConfigurationError("Missing configuration property: producer_url")
        return cls(config.producer_url, client=client, timeout=config.timeout_seconds)

    def send_plan(self, plan: ExecutionPlan) -> str:
        return self._send_json(plan.model_dump_json(), self.execution_plans_url)

    def send_event(self, event: ExecutionEvent) -> None:
        self._send_json(_EVENTS.dump_json([event]).decode(), self.execution_events_url)

    def _send_json(self, json: str, url: str) -> str:
        logger.debug("sendJson %s : %s", url, json)
        try:
            response = self._client.post(
                url,
                content=json,
                headers={"content-type": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise DispatchError(f"Cannot send lineage data to {url}") from e
        return response.text

    def ensure_producer_ready(self) -> None:
        try:
            response = self._client.head(self.status_url)
        except httpx.HTTPError as e:
            raise ProducerNotInitializedError(
                "Harvester was not able to establish connection to the lineage collector.",
                connected=False,
            ) from e
        if not response.is_success:
            raise ProducerNotInitializedError(
                "Connection to the lineage collector: OK, but the collector is not "
                "initialized properly! Check the collector's logs.",
                connected=True,
            )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpLineageDispatcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
