"""Shared async HTTP client and traced GET helper.

Requests are sent exactly once; a transport failure surfaces to the caller as
``httpx.HTTPError`` (or ``httpx.InvalidURL`` when the URL cannot be built).
"""
from collections.abc import Mapping
from time import perf_counter
from typing import Any

import httpx
from opentelemetry.context import Context

from shared.metrics import observe_upstream
from shared.tracing import Tracing


def create_http_client(
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the long-lived async HTTP client of a service."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        transport=transport or httpx.AsyncHTTPTransport(retries=0),
    )


async def traced_get(
    client: httpx.AsyncClient,
    url: str,
    *,
    tracing: Tracing,
    context: Context,
    upstream: str,
    params: Mapping[str, Any] | None = None,
) -> httpx.Response:
    """GET ``url`` with ``context`` injected into the request headers."""
    headers = tracing.inject(context)
    start = perf_counter()
    try:
        resp = await client.get(url, params=params, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL):
        observe_upstream(upstream, "transport_error", perf_counter() - start)
        raise
    observe_upstream(upstream, str(resp.status_code), perf_counter() - start)
    return resp
