"""HTTP client for the weather service."""
import httpx
from opentelemetry.context import Context

from shared.http_client import traced_get
from shared.tracing import Tracing


class WeatherServiceClient:
    def __init__(self, client: httpx.AsyncClient, base_url: str, tracing: Tracing) -> None:
        self._client = client
        self._base_url = base_url
        self._tracing = tracing

    async def get_temperature(self, cep: str, context: Context) -> httpx.Response:
        """Forward ``cep`` once. Raises ``httpx.HTTPError`` or ``httpx.InvalidURL``."""
        return await traced_get(
            self._client,
            self._base_url,
            tracing=self._tracing,
            context=context,
            upstream="weather",
            params={"cep": cep},
        )
