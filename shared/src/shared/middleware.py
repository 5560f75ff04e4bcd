"""FastAPI middleware for request_id and inbound trace context."""
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from shared.logging import clear_request_context, set_request_context
from shared.tracing import Tracing


def get_request_id_from_headers(request: Request) -> str | None:
    """Extract X-Request-ID from request headers."""
    return request.headers.get("X-Request-ID")


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind request_id for logging and expose the caller's trace context.

    The extracted context is stored on ``request.state.trace_context`` so the
    route can pass it explicitly to the service that opens the request span.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id_from_headers(request) or str(uuid.uuid4())
        tracing: Tracing = request.app.state.tracing
        request.state.trace_context = tracing.extract(request.headers)
        set_request_context(request_id=request_id)
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_request_context()
