"""Tests for the traced GET helper."""
import httpx
import pytest
from opentelemetry.context import Context
from prometheus_client import REGISTRY

from shared.http_client import create_http_client, traced_get
from shared.tracing import Tracing


def _count(upstream: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "upstream_requests_total", {"upstream": upstream, "outcome": outcome}
    )
    return value or 0.0


@pytest.mark.asyncio
async def test_traced_get_injects_traceparent(tracing: Tracing) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    before = _count("test-ok", "200")
    async with create_http_client(transport=httpx.MockTransport(handler)) as client:
        with tracing.span("outbound", Context()) as context:
            resp = await traced_get(
                client,
                "http://upstream/x",
                tracing=tracing,
                context=context,
                upstream="test-ok",
                params={"q": "São Paulo"},
            )
    assert resp.status_code == 200
    assert len(seen) == 1
    assert "traceparent" in seen[0].headers
    assert seen[0].url.params["q"] == "São Paulo"
    assert _count("test-ok", "200") == before + 1


@pytest.mark.asyncio
async def test_traced_get_reraises_transport_error(tracing: Tracing) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    before = _count("test-down", "transport_error")
    async with create_http_client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(httpx.ConnectError):
            await traced_get(
                client,
                "http://upstream/x",
                tracing=tracing,
                context=Context(),
                upstream="test-down",
            )
    assert _count("test-down", "transport_error") == before + 1
