"""Weather service configuration."""
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from shared.config import ServiceSettings


class WeatherSettings(ServiceSettings):
    model_config = SettingsConfigDict(env_prefix="WEATHER_", populate_by_name=True)

    service_name: str = "weather"
    port: int = 8000
    geocode_base_url: str = "http://viacep.com.br/ws"
    weather_api_url: str = "http://api.weatherapi.com/v1/current.json"
    weather_api_key: str = Field("", validation_alias="WEATHER_API_KEY")
