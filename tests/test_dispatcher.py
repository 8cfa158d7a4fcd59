# tests/test_dispatcher.py
# Tests for the HTTP lineage dispatcher.

"""
Unit tests for HttpLineageDispatcher against an in-process mock transport.

Tests cover:
- URL layout of the collector resources
- Plan and event payloads
- Error wrapping for failed sends
- Readiness probe outcomes (ready, not initialized, unreachable)
"""

import json

import httpx
import pytest

from lineage_harvester.core.config import HarvesterConfig
from lineage_harvester.dispatcher import HttpLineageDispatcher, RESTResource
from lineage_harvester.exceptions import (
    ConfigurationError,
    DispatchError,
    ProducerNotInitializedError,
)
from lineage_harvester.models import ExecutionEvent, ExecutionPlan, ReadOperation

BASE_URL = "http://collector:8080/producer"


class Collector:
    """Records requests and answers with a fixed status."""

    def __init__(self, status_code: int = 200, body: str = "plan-42") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)


def dispatcher_for(handler) -> HttpLineageDispatcher:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpLineageDispatcher(BASE_URL + "/", client=client)


class TestUrls:
    def test_resource_urls(self):
        dispatcher = dispatcher_for(Collector())
        assert dispatcher.execution_plans_url == f"{BASE_URL}/{RESTResource.EXECUTION_PLANS}"
        assert dispatcher.execution_events_url == f"{BASE_URL}/execution-events"
        assert dispatcher.status_url == f"{BASE_URL}/status"


class TestSend:
    def test_send_plan(self):
        collector = Collector()
        plan = ExecutionPlan(name="job", reads=[ReadOperation(inputs=["file:/a"], format="csv")])

        with dispatcher_for(collector) as dispatcher:
            assert dispatcher.send_plan(plan) == "plan-42"

        request = collector.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/execution-plans"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content)["reads"][0]["inputs"] == ["file:/a"]

    def test_send_event_as_array(self):
        collector = Collector()
        dispatcher_for(collector).send_event(ExecutionEvent(plan_id="p-1", timestamp=1))

        request = collector.requests[0]
        assert str(request.url) == f"{BASE_URL}/execution-events"
        body = json.loads(request.content)
        assert isinstance(body, list)
        assert body[0]["plan_id"] == "p-1"

    def test_error_status_raises(self):
        dispatcher = dispatcher_for(Collector(status_code=500))
        with pytest.raises(DispatchError, match="execution-plans") as exc_info:
            dispatcher.send_plan(ExecutionPlan(name="job"))
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    def test_transport_error_raises(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DispatchError):
            dispatcher_for(refuse).send_event(ExecutionEvent(plan_id="p-1"))


class TestReadiness:
    def test_ready(self):
        collector = Collector()
        dispatcher_for(collector).ensure_producer_ready()

        request = collector.requests[0]
        assert request.method == "HEAD"
        assert str(request.url) == f"{BASE_URL}/status"

    def test_not_initialized(self):
        dispatcher = dispatcher_for(Collector(status_code=503))
        with pytest.raises(ProducerNotInitializedError, match="not initialized") as exc_info:
            dispatcher.ensure_producer_ready()
        assert exc_info.value.connected is True

    def test_unreachable(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProducerNotInitializedError, match="establish connection") as exc_info:
            dispatcher_for(refuse).ensure_producer_ready()
        assert exc_info.value.connected is False
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestFromConfig:
    def test_requires_producer_url(self):
        with pytest.raises(ConfigurationError, match="producer_url"):
            HttpLineageDispatcher.from_config(HarvesterConfig())

    def test_uses_producer_url(self):
        config = HarvesterConfig(producer_url=BASE_URL)
        dispatcher = HttpLineageDispatcher.from_config(
            config, client=httpx.Client(transport=httpx.MockTransport(Collector()))
        )
        assert dispatcher.base_url == BASE_URL
