"""HTTP client for the ViaCEP geocoding API."""
from typing import Any

import httpx
import pydantic
from opentelemetry.context import Context
from opentelemetry.trace import SpanKind

from shared.http_client import traced_get
from shared.tracing import Tracing

from weather.clients.errors import (
    GeocodeLookupError,
    GeocodeTransportError,
    LocalityNotFoundError,
)


class ViaCepAddress(pydantic.BaseModel):
    """Subset of the ViaCEP address payload. Unknown CEPs come back as {"erro": true}."""

    localidade: Any = None


class GeocodeClient:
    def __init__(self, client: httpx.AsyncClient, base_url: str, tracing: Tracing) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._tracing = tracing

    async def resolve(self, cep: str, context: Context) -> str:
        """Return the locality of ``cep``.

        Raises GeocodeLookupError, LocalityNotFoundError or GeocodeTransportError.
        """
        url = f"{self._base_url}/{cep}/json/"
        with self._tracing.span(
            "get-location viacep",
            context,
            kind=SpanKind.CLIENT,
            attributes={"cep": cep},
        ) as span_context:
            try:
                resp = await traced_get(
                    self._client,
                    url,
                    tracing=self._tracing,
                    context=span_context,
                    upstream="viacep",
                )
            except httpx.HTTPError as e:
                raise GeocodeTransportError(str(e)) from e
            if resp.status_code != httpx.codes.OK:
                raise GeocodeLookupError(f"invalid response from ViaCEP: {resp.status_code}")
            try:
                address = ViaCepAddress.model_validate_json(resp.content)
            except pydantic.ValidationError as e:
                raise GeocodeLookupError("undecodable response from ViaCEP") from e
            if not isinstance(address.localidade, str) or not address.localidade:
                raise LocalityNotFoundError("localidade not found in response")
            return address.localidade
