from weather.service.converter import TemperatureReport, convert
from weather.service.weather_service import WeatherService

__all__ = ["TemperatureReport", "WeatherService", "convert"]
