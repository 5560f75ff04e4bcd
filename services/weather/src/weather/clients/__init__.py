from weather.clients.errors import GeocodeError, WeatherProviderError
from weather.clients.geocode_client import GeocodeClient
from weather.clients.weatherapi_client import WeatherApiClient

__all__ = ["GeocodeClient", "GeocodeError", "WeatherApiClient", "WeatherProviderError"]
