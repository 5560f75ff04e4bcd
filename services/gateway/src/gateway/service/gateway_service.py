"""Gateway: validate the CEP, forward it to the weather service, relay the answer."""
from dataclasses import dataclass

import httpx
import pydantic
import structlog
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import SpanKind

from shared.cep import validate_cep
from shared.errors import NotFoundError, UpstreamError, ValidationError
from shared.schemas import TemperatureResponse
from shared.tracing import Tracing

from gateway.api.schemas import CepRequest
from gateway.clients import WeatherServiceClient

INVALID_WEATHER_RESPONSE = "invalid response from weather service"

logger = structlog.get_logger(__name__)


@dataclass
class RelayResult:
    """What the gateway answers: a decoded report, or the backend's raw error body."""

    status_code: int
    payload: TemperatureResponse | None = None
    content: bytes = b""
    media_type: str | None = None


def parse_cep(body: bytes) -> str:
    try:
        request = CepRequest.model_validate_json(body)
    except pydantic.ValidationError as e:
        raise ValidationError() from e
    return validate_cep(request.cep)


def relay(resp: httpx.Response) -> RelayResult:
    """Map the weather service response onto the gateway response.

    404 becomes the gateway's own not-found error. A 2xx body must decode as a
    TemperatureResponse, otherwise the gateway fails with 500 instead of
    emitting an empty report. Other statuses pass through with their body.
    """
    if resp.status_code == httpx.codes.NOT_FOUND:
        raise NotFoundError()
    if resp.is_success:
        try:
            payload = TemperatureResponse.model_validate_json(resp.content)
        except pydantic.ValidationError as e:
            logger.error("weather_response_invalid", status_code=resp.status_code)
            raise UpstreamError(INVALID_WEATHER_RESPONSE) from e
        return RelayResult(status_code=resp.status_code, payload=payload)
    return RelayResult(
        status_code=resp.status_code,
        content=resp.content,
        media_type=resp.headers.get("content-type"),
    )


class GatewayService:
    def __init__(self, weather_client: WeatherServiceClient, tracing: Tracing) -> None:
        self._weather = weather_client
        self._tracing = tracing

    async def forward(self, body: bytes, context: Context) -> RelayResult:
        """Raises ValidationError (422), NotFoundError (404) or UpstreamError (500)."""
        with self._tracing.span(
            "request-temp-info-to-weather", context, kind=SpanKind.SERVER
        ) as span_context:
            cep = parse_cep(body)
            try:
                resp = await self._weather.get_temperature(cep, span_context)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                detail = str(e) or type(e).__name__
                logger.error("weather_service_unreachable", cep=cep, error=detail)
                raise UpstreamError(f"weather service request error: {detail}") from e
            trace.get_current_span(span_context).set_attribute(
                "weather.status_code", resp.status_code
            )
            logger.info("weather_service_responded", cep=cep, status_code=resp.status_code)
            return relay(resp)
