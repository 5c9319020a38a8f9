from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

# --- WeatherAPI.com forecast response ---


class WeatherApiCondition(BaseModel):
    """Condition text and WeatherAPI.com condition code."""

    text: str
    code: int


class WeatherApiDay(BaseModel):
    maxtemp_c: float
    mintemp_c: float
    condition: WeatherApiCondition


class WeatherApiHour(BaseModel):
    time: str
    temp_c: float
    condition: WeatherApiCondition
    will_it_rain: int
    chance_of_rain: float


class WeatherApiForecastDay(BaseModel):
    date: str
    day: WeatherApiDay
    astro: dict = Field(default_factory=dict)
    hour: List[WeatherApiHour] = Field(default_factory=list)


class WeatherApiForecast(BaseModel):
    forecastday: List[WeatherApiForecastDay]


class WeatherApiResponse(BaseModel):
    """The parts of the /forecast.json response the app relies on."""

    forecast: WeatherApiForecast


# --- App facing models ---


class WeatherIcon(str, Enum):
    SUNNY = "Sunny"
    PARTLY_CLOUDY = "Partly cloudy"
    CLOUDY = "Cloudy"
    MIST = "Mist"
    RAINY = "Rainy"
    STORMY = "Stormy"


class DailyForecast(BaseModel):
    day: str = Field(description="'Today', 'Tomorrow' or the weekday name.")
    temp: str = Field(description="Rounded maximum temperature, e.g. '31°C'.")
    condition: str
    icon: WeatherIcon


class WeatherAnalysis(BaseModel):
    summary: str = Field(
        description=(
            "A brief, friendly, one-sentence summary of the weather for the next"
            " 3 days. Mention the location."
        )
    )
    alert: Optional[str] = Field(
        default=None,
        description=(
            "A brief, friendly alert for any urgent weather conditions (e.g., high"
            " winds, storms, heavy rain) in the next 3 days. Empty if none."
        ),
    )


class WeatherForecastResponse(BaseModel):
    location: str
    summary: str
    forecast: List[DailyForecast]
    alert: Optional[str] = None
