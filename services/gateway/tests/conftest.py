"""Fixtures for gateway tests: a fake weather service behind MockTransport."""
import httpx
import pytest

from gateway.config import GatewaySettings

REPORT = {"city": "São Paulo", "temp_C": 28.5, "temp_F": 83.3, "temp_K": 301.65}


class FakeWeatherService:
    """Records forwarded requests and answers with ``self.response``."""

    def __init__(self) -> None:
        self.response = httpx.Response(200, json=REPORT)
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        template = self.response
        return httpx.Response(
            template.status_code, headers=template.headers, content=template.content
        )


@pytest.fixture
def backend() -> FakeWeatherService:
    return FakeWeatherService()


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(
        weather_url="http://weather.test/",
        otel_enabled=False,
        json_logs=False,
    )
