"""OpenTelemetry tracing: provider setup and explicit trace-context propagation.

The provider and propagator are never installed globally. Each service builds a
``Tracing`` once at startup and hands it to the components that open spans.
Trace context travels as an explicit ``Context`` argument: ``Tracing.span``
derives a new context holding the child span and leaves the caller's untouched.
"""
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import structlog
from opentelemetry import context as otel_context
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.trace import SpanKind, Status, StatusCode
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

logger = structlog.get_logger(__name__)


def configure_tracing(
    service_name: str,
    endpoint: str,
    *,
    export_enabled: bool = True,
    export_timeout_seconds: float = 1.0,
) -> TracerProvider:
    """Build a tracer provider that samples everything and exports over OTLP/gRPC.

    Args:
        service_name: Value of the ``service.name`` resource attribute.
        endpoint: Collector address, e.g. ``opentelemetry-collector:4317``.
        export_enabled: When false, spans are recorded but not exported.
        export_timeout_seconds: Deadline for each export call.

    Returns:
        The provider. The caller owns it and must pass it to ``shutdown_tracing``.
    """
    resource = Resource.create({SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource, sampler=ALWAYS_ON)
    if export_enabled:
        exporter = OTLPSpanExporter(
            endpoint=endpoint,
            insecure=True,
            timeout=export_timeout_seconds,
        )
        provider.add_span_processor(BatchSpanProcessor(exporter))
    logger.info(
        "tracing_configured",
        service=service_name,
        endpoint=endpoint if export_enabled else None,
    )
    return provider


def shutdown_tracing(provider: TracerProvider, timeout_seconds: float) -> bool:
    """Flush pending spans within ``timeout_seconds`` and stop the provider."""
    flushed = provider.force_flush(timeout_millis=int(timeout_seconds * 1000))
    provider.shutdown()
    logger.info("tracing_shutdown", flushed=flushed)
    return flushed


class Tracing:
    """Tracer plus propagator, shared read-only by the components of one service."""

    def __init__(
        self,
        tracer_provider: trace.TracerProvider,
        instrumentation_name: str,
        propagator: TextMapPropagator | None = None,
    ) -> None:
        self._tracer = tracer_provider.get_tracer(instrumentation_name)
        self._propagator = propagator or TraceContextTextMapPropagator()

    def extract(self, headers: Mapping[str, str]) -> Context:
        """Read the caller's trace context from inbound headers.

        Returns an empty context (new root trace) when the headers carry none.
        """
        return self._propagator.extract(carrier=headers, context=Context())

    def inject(
        self, context: Context, headers: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Return a copy of ``headers`` with ``context`` written into it."""
        carrier: dict[str, str] = dict(headers or {})
        self._propagator.inject(carrier, context=context)
        return carrier

    @contextmanager
    def span(
        self,
        name: str,
        context: Context,
        *,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
    ) -> Iterator[Context]:
        """Open a child span of ``context`` and yield the context that contains it.

        The span is ended on every exit path. Exceptions are recorded on the
        span and re-raised. While the block runs the new context is also the
        current one, so log lines pick up its trace and span ids.
        """
        span = self._tracer.start_span(
            name, context=context, kind=kind, attributes=attributes
        )
        span_context = trace.set_span_in_context(span, context)
        token = otel_context.attach(span_context)
        try:
            yield span_context
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            raise
        finally:
            otel_context.detach(token)
            span.end()


def current_trace_ids() -> tuple[str, str]:
    """Hex trace id and span id of the active span, or empty strings."""
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return "", ""
    return (
        trace.format_trace_id(span_context.trace_id),
        trace.format_span_id(span_context.span_id),
    )
