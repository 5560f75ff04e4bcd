"""Base configuration and env handling."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Base settings with common env config. Instances are immutable."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


class ServiceSettings(BaseAppSettings):
    """Settings every HTTP service in the pipeline shares."""

    service_name: str = ""
    host: str = "0.0.0.0"
    port: int = 8000
    json_logs: bool = True

    otel_enabled: bool = True
    otel_exporter_endpoint: str = "opentelemetry-collector:4317"
    otel_export_timeout_seconds: float = 1.0

    # Applies to every outbound call; uvicorn has no per-request read/write timeout.
    http_timeout_seconds: float = 10.0
    shutdown_grace_seconds: int = 30
