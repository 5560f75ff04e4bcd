"""HTTP client for the WeatherAPI current-conditions endpoint."""
from typing import Annotated

import httpx
import pydantic
from opentelemetry.context import Context
from opentelemetry.trace import SpanKind

from shared.http_client import traced_get
from shared.tracing import Tracing

from weather.clients.errors import (
    TemperatureFieldMissingError,
    WeatherProviderStatusError,
    WeatherTransportError,
)

# JSON integers are accepted and widened to float; strings, booleans, NaN and
# infinities are not.
Number = Annotated[pydantic.StrictFloat, pydantic.AllowInfNan(False)]


class CurrentConditions(pydantic.BaseModel):
    temp_c: Number


class CurrentWeather(pydantic.BaseModel):
    current: CurrentConditions


class WeatherApiClient:
    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        api_key: str,
        tracing: Tracing,
    ) -> None:
        self._client = client
        self._base_url = base_url
        self._api_key = api_key
        self._tracing = tracing

    async def current_celsius(self, locality: str, context: Context) -> float:
        """Current temperature in Celsius at ``locality``.

        Raises WeatherProviderStatusError, TemperatureFieldMissingError or
        WeatherTransportError.
        """
        with self._tracing.span(
            "get-temperature weatherapi",
            context,
            kind=SpanKind.CLIENT,
            attributes={"locality": locality},
        ) as span_context:
            try:
                resp = await traced_get(
                    self._client,
                    self._base_url,
                    tracing=self._tracing,
                    context=span_context,
                    upstream="weatherapi",
                    params={"key": self._api_key, "q": locality},
                )
            except httpx.HTTPError as e:
                raise WeatherTransportError(str(e)) from e
            if resp.status_code != httpx.codes.OK:
                raise WeatherProviderStatusError(
                    f"invalid response from WeatherAPI: {resp.status_code}"
                )
            try:
                payload = CurrentWeather.model_validate_json(resp.content)
            except pydantic.ValidationError as e:
                raise TemperatureFieldMissingError(
                    "temperature data not found in response"
                ) from e
            return payload.current.temp_c
