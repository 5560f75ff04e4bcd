"""Common DTOs and schemas."""
from shared.schemas.health import HealthResponse
from shared.schemas.temperature import TemperatureResponse

__all__ = ["HealthResponse", "TemperatureResponse"]
