"""Error taxonomy shared by the gateway and weather services.

Every error carries the HTTP status and the plain-text message the caller
receives. Handlers raise them; ``register_error_handlers`` renders them.
"""
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

INVALID_ZIPCODE = "invalid zipcode"
ZIPCODE_NOT_FOUND = "can not find zipcode"
TEMPERATURE_UNAVAILABLE = "error fetching temperature"
INTERNAL_ERROR = "internal server error"

logger = structlog.get_logger(__name__)


class ServiceError(Exception):
    """Base error mapped to an HTTP response at the handler boundary."""

    status_code: int = 500
    default_message: str = INTERNAL_ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Malformed or wrong-length postal code."""

    status_code = 422
    default_message = INVALID_ZIPCODE


class NotFoundError(ServiceError):
    """Postal code or locality could not be resolved."""

    status_code = 404
    default_message = ZIPCODE_NOT_FOUND


class UpstreamError(ServiceError):
    """Transport failure or unexpected response from a downstream hop."""

    status_code = 500
    default_message = TEMPERATURE_UNAVAILABLE


def register_error_handlers(app: FastAPI) -> None:
    """Render ServiceError as text/plain; log and hide anything else."""

    @app.exception_handler(ServiceError)
    async def _service_error(request: Request, exc: ServiceError) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception(
            "unhandled_exception",
            path=str(request.url.path),
            error_type=type(exc).__name__,
        )
        return PlainTextResponse(INTERNAL_ERROR, status_code=500)
