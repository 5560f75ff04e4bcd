"""Weather service API routes."""
from fastapi import APIRouter, Request

from shared.schemas import TemperatureResponse

from weather.service import WeatherService

router = APIRouter(tags=["weather"])


@router.get("/", response_model=TemperatureResponse)
async def get_weather(request: Request, cep: str = "") -> TemperatureResponse:
    service: WeatherService = request.app.state.weather_service
    report = await service.report(cep, request.state.trace_context)
    return TemperatureResponse(
        city=report.locality,
        temp_C=report.celsius,
        temp_F=report.fahrenheit,
        temp_K=report.kelvin,
    )
