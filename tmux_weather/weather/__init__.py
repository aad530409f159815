"""Weather module for fetching and formatting weather data."""

from .formatting import format_status_line, format_temperature, get_icon
from .views import CurrentlyResponse, DailyResponse, WeatherResponse
from .weather import (
    WEATHER_CACHE_KEY,
    WeatherServiceError,
    create_weather_fetcher,
    fetch_weather_data,
)

__all__ = [
    "WEATHER_CACHE_KEY",
    "CurrentlyResponse",
    "DailyResponse",
    "WeatherResponse",
    "WeatherServiceError",
    "create_weather_fetcher",
    "fetch_weather_data",
    "format_status_line",
    "format_temperature",
    "get_icon",
]
