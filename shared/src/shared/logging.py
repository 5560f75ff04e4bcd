"""Structured logging with request_id and OpenTelemetry trace correlation."""
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog

from shared.tracing import current_trace_ids

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return request_id_var.get() or ""


def set_request_context(request_id: str | None = None) -> None:
    request_id_var.set(request_id or str(uuid.uuid4()))


def clear_request_context() -> None:
    request_id_var.set("")


def add_request_context(
    logger: Any,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to inject request_id, trace_id and span_id into log events."""
    rid = get_request_id()
    if rid:
        event_dict["request_id"] = rid
    trace_id, span_id = current_trace_ids()
    if trace_id:
        event_dict["trace_id"] = trace_id
        event_dict["span_id"] = span_id
    return event_dict


def configure_logging(json_logs: bool = True) -> None:
    """Configure structlog for JSON output and request/trace correlation."""
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_request_context,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=shared_processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
