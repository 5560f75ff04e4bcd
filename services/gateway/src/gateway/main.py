"""Gateway service entrypoint: validates CEPs and forwards them to the weather service."""
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider
from prometheus_client import make_asgi_app

from shared.errors import register_error_handlers
from shared.http_client import create_http_client
from shared.logging import configure_logging
from shared.middleware import RequestIdMiddleware
from shared.schemas import HealthResponse
from shared.tracing import Tracing, configure_tracing, shutdown_tracing

from gateway.api.routes import router
from gateway.clients import WeatherServiceClient
from gateway.config import GatewaySettings
from gateway.service import GatewayService

_settings: GatewaySettings | None = None


def get_settings() -> GatewaySettings:
    global _settings
    if _settings is None:
        _settings = GatewaySettings()
    return _settings


def create_app(
    settings: GatewaySettings | None = None,
    *,
    tracer_provider: TracerProvider | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(json_logs=settings.json_logs)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_provider = tracer_provider is None
        provider = tracer_provider or configure_tracing(
            settings.service_name,
            settings.otel_exporter_endpoint,
            export_enabled=settings.otel_enabled,
            export_timeout_seconds=settings.otel_export_timeout_seconds,
        )
        tracing = Tracing(provider, "gateway")
        http_client = create_http_client(settings.http_timeout_seconds, transport=transport)
        app.state.tracing = tracing
        app.state.gateway_service = GatewayService(
            WeatherServiceClient(http_client, settings.weather_url, tracing),
            tracing,
        )
        try:
            yield
        finally:
            await http_client.aclose()
            if owns_provider:
                shutdown_tracing(provider, settings.shutdown_grace_seconds)

    app = FastAPI(title="Gateway Service", version="0.1.0", lifespan=lifespan)
    app.add_middleware(RequestIdMiddleware)
    register_error_handlers(app)

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service=settings.service_name)

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        return HealthResponse(status="ok", service=settings.service_name)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
    )
