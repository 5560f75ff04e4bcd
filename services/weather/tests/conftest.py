"""Fixtures for weather service tests: fake ViaCEP and WeatherAPI upstreams."""
import httpx
import pytest

from weather.config import WeatherSettings

VIACEP_URL = "http://viacep.test/ws"
WEATHERAPI_URL = "http://weatherapi.test/v1/current.json"


def _fresh(template: httpx.Response) -> httpx.Response:
    """A new response per request; a response object cannot be sent twice."""
    return httpx.Response(
        template.status_code, headers=template.headers, content=template.content
    )


class FakeUpstreams:
    """MockTransport handler answering ViaCEP and WeatherAPI with canned responses."""

    def __init__(self) -> None:
        self.geocode = httpx.Response(200, json={"cep": "01001-000", "localidade": "São Paulo"})
        self.weather = httpx.Response(200, json={"current": {"temp_c": 28.5}})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "viacep.test":
            return _fresh(self.geocode)
        if request.url.host == "weatherapi.test":
            return _fresh(self.weather)
        raise AssertionError(f"unexpected request to {request.url}")

    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]


@pytest.fixture
def upstreams() -> FakeUpstreams:
    return FakeUpstreams()


@pytest.fixture
def http_client(upstreams: FakeUpstreams) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(upstreams))


@pytest.fixture
def settings() -> WeatherSettings:
    return WeatherSettings(
        geocode_base_url=VIACEP_URL,
        weather_api_url=WEATHERAPI_URL,
        weather_api_key="test-key",
        otel_enabled=False,
        json_logs=False,
    )
