import logging
import math
from datetime import datetime
from typing import List

import httpx
from fastapi import HTTPException, status
from pydantic import ValidationError

from app.core.ai_errors import ai_http_exception
from app.core.config import settings
from app.core.genai_client import ainvoke_structured
from app.models.user import RequestContext
from app.models.weather import (
    DailyForecast,
    WeatherAnalysis,
    WeatherApiForecastDay,
    WeatherApiResponse,
    WeatherForecastResponse,
    WeatherIcon,
)
from app.prompts.weather_analysis_system_prompt import WEATHER_ANALYSIS_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_WEATHER_ICON = WeatherIcon.CLOUDY

# WeatherAPI.com condition codes, grouped by the icon shown for them.
_ICON_CONDITION_CODES: dict[WeatherIcon, tuple[int, ...]] = {
    WeatherIcon.SUNNY: (1000,),
    WeatherIcon.PARTLY_CLOUDY: (1003,),
    WeatherIcon.CLOUDY: (1006, 1009),
    WeatherIcon.MIST: (1030, 1135, 1147),
    WeatherIcon.STORMY: (1087, 1117, 1273, 1276, 1279, 1282),
    WeatherIcon.RAINY: (
        1063, 1066, 1069, 1072, 1114, 1150, 1153, 1168, 1171, 1180, 1183,
        1186, 1189, 1192, 1195, 1198, 1201, 1204, 1207, 1210, 1213, 1216,
        1219, 1222, 1225, 1237, 1240, 1243, 1246, 1249, 1252, 1255, 1258,
        1261, 1264,
    ),
}


def _build_condition_icon_table() -> dict[int, WeatherIcon]:
    table: dict[int, WeatherIcon] = {}
    for icon, codes in _ICON_CONDITION_CODES.items():
        for code in codes:
            if code in table:
                raise RuntimeError(
                    f"Weather condition code {code} mapped to both {table[code].value} and {icon.value}"
                )
            table[code] = icon
    if DEFAULT_WEATHER_ICON not in set(table.values()):
        raise RuntimeError("Default weather icon is not part of the condition table")
    return table


CONDITION_CODE_ICONS = _build_condition_icon_table()


def icon_for_condition_code(code: int) -> WeatherIcon:
    return CONDITION_CODE_ICONS.get(code, DEFAULT_WEATHER_ICON)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _day_label(index: int, date_text: str) -> str:
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return datetime.strptime(date_text, "%Y-%m-%d").strftime("%A")


def build_daily_forecast(days: List[WeatherApiForecastDay]) -> List[DailyForecast]:
    return [
        DailyForecast(
            day=_day_label(index, day.date),
            temp=f"{_round_half_up(day.day.maxtemp_c)}°C",
            condition=day.day.condition.text,
            icon=icon_for_condition_code(day.day.condition.code),
        )
        for index, day in enumerate(days)
    ]


async def fetch_weatherapi_forecast(location: str) -> WeatherApiResponse:
    """
    Fetches a multi-day forecast from WeatherAPI.com.

    Args:
        location: Village, town or "lat,lon" query.

    Returns:
        The validated forecast response.
    """
    if not settings.WEATHER_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The Weather API key is not configured. Please set WEATHER_API_KEY.",
        )

    params = {
        "key": settings.WEATHER_API_KEY,
        "q": location,
        "days": settings.WEATHER_FORECAST_DAYS,
    }
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(
                f"{settings.WEATHER_API_BASE_URL}/forecast.json",
                params=params,
                timeout=30.0,
            )
        except httpx.RequestError as e:
            logger.warning("Weather service connection failed for %s: %s", location, e)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Failed to connect to weather service: {e}",
            ) from e

    if response.status_code == 401:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Weather API key is invalid or unauthorized.",
        )
    if response.status_code != 200:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to fetch weather data. Status: {response.status_code} {response.reason_phrase}",
        )

    try:
        return WeatherApiResponse.model_validate(response.json())
    except (ValidationError, ValueError) as e:
        logger.exception("Unexpected weather data for %s", location)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Received unexpected data from the weather service.",
        ) from e


async def get_weather_forecast(
    context: RequestContext, location: str | None = None
) -> WeatherForecastResponse:
    location = location or context.user.village or settings.DEFAULT_LOCATION
    weather_data = await fetch_weatherapi_forecast(location)

    try:
        analysis = await ainvoke_structured(
            WeatherAnalysis,
            WEATHER_ANALYSIS_SYSTEM_PROMPT,
            {
                "location": location,
                "weather_data": weather_data.model_dump(mode="json"),
            },
            language=context.language,
        )
    except Exception as exc:
        logger.exception("Weather summary failed for location=%s", location)
        raise ai_http_exception(
            exc, "Failed to generate weather summary from AI."
        ) from exc

    if analysis is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate weather summary from AI.",
        )

    return WeatherForecastResponse(
        location=location,
        summary=analysis.summary,
        forecast=build_daily_forecast(weather_data.forecast.forecastday),
        alert=analysis.alert or None,
    )
