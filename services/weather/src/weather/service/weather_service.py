"""Weather lookup: CEP -> locality -> current temperature -> report."""
import structlog
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import SpanKind

from shared.cep import validate_cep
from shared.errors import NotFoundError, UpstreamError
from shared.tracing import Tracing

from weather.clients import (
    GeocodeClient,
    GeocodeError,
    WeatherApiClient,
    WeatherProviderError,
)
from weather.service.converter import TemperatureReport, convert

logger = structlog.get_logger(__name__)


class WeatherService:
    """Resolves a CEP to a temperature report, one pass, no retries."""

    def __init__(
        self,
        geocode_client: GeocodeClient,
        weather_client: WeatherApiClient,
        tracing: Tracing,
    ) -> None:
        self._geocode = geocode_client
        self._weather = weather_client
        self._tracing = tracing

    async def report(self, cep: str | None, context: Context) -> TemperatureReport:
        """Raises ValidationError (422), NotFoundError (404) or UpstreamError (500)."""
        with self._tracing.span(
            "get-weather-handler", context, kind=SpanKind.SERVER
        ) as span_context:
            cep = validate_cep(cep)
            try:
                locality = await self._geocode.resolve(cep, span_context)
            except GeocodeError as e:
                logger.warning("geocode_failed", cep=cep, kind=e.kind, error=str(e))
                raise NotFoundError() from e

            try:
                celsius = await self._weather.current_celsius(locality, span_context)
            except WeatherProviderError as e:
                logger.warning(
                    "temperature_failed", locality=locality, kind=e.kind, error=str(e)
                )
                raise UpstreamError() from e

            report = convert(celsius, locality=locality)
            trace.get_current_span(span_context).set_attribute("city", locality)
            logger.info("weather_resolved", city=locality, temp_c=report.celsius)
            return report
