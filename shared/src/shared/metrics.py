"""Prometheus metrics for outbound calls."""
from prometheus_client import Counter, Histogram

UPSTREAM_REQUESTS = Counter(
    "upstream_requests_total",
    "Outbound HTTP requests by upstream and outcome.",
    ["upstream", "outcome"],
)

UPSTREAM_LATENCY = Histogram(
    "upstream_request_duration_seconds",
    "Outbound HTTP request latency in seconds.",
    ["upstream"],
)


def observe_upstream(upstream: str, outcome: str, elapsed_seconds: float) -> None:
    UPSTREAM_REQUESTS.labels(upstream=upstream, outcome=outcome).inc()
    UPSTREAM_LATENCY.labels(upstream=upstream).observe(elapsed_seconds)
