"""Wire schema of the temperature report exchanged by weather and gateway."""
from pydantic import BaseModel


class TemperatureResponse(BaseModel):
    """Body of a successful weather lookup."""

    city: str
    temp_C: float
    temp_F: float
    temp_K: float
