import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = "gemini-2.5-flash"
    WEATHER_API_KEY: str = os.environ.get("WEATHER_API_KEY", "")
    WEATHER_API_BASE_URL: str = "https://api.weatherapi.com/v1"
    WEATHER_FORECAST_DAYS: int = 3
    JWT_SECRET_KEY: str = os.environ.get("JWT_SECRET_KEY", "")
    MONGO_URI: str = os.environ.get("MONGO_URI", "")
    MONGO_DB_NAME: str = "kisan_sathi"
    MARKET_PRICES_PATH: str = os.path.join(
        os.path.dirname(os.path.dirname(__file__)), "data", "market_prices.json"
    )
    DEFAULT_LOCATION: str = "Rampur"
    LOG_LEVEL: str = "INFO"


settings = Settings()
