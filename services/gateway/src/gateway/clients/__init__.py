from gateway.clients.weather_client import WeatherServiceClient

__all__ = ["WeatherServiceClient"]
