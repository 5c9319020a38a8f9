from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_request_context
from app.models.user import RequestContext
from app.models.weather import WeatherForecastResponse
from app.services.weather_service import get_weather_forecast

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get(
    "/forecast",
    response_model=WeatherForecastResponse,
    response_model_exclude_none=True,
)
async def get_forecast(
    location: Optional[str] = Query(
        default=None, description="Location. Defaults to the user's village."
    ),
    context: RequestContext = Depends(get_request_context),
):
    """
    Get a 3-day forecast with a short summary and an optional weather alert.
    """
    return await get_weather_forecast(context, location=location)
