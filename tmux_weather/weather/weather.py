import logging
from datetime import timedelta

import aiohttp

from tmux_weather.cache import DEFAULT_FRESHNESS, CachedFetcher, EntryStore, ErrorSink
from tmux_weather.config.models import FORECAST_URL
from tmux_weather.location import LatLon
from tmux_weather.weather.views import WeatherResponse

WEATHER_CACHE_KEY = "weather"

logger = logging.getLogger(__name__)


class WeatherServiceError(RuntimeError):
    pass


async def fetch_weather_data(
    location: LatLon, api_key: str, url_template: str = FORECAST_URL
) -> WeatherResponse:
    """Fetch current conditions from forecast.io for the given coordinates."""
    logger.debug("fetching weather...")

    url = url_template.format(
        api_key=api_key,
        latitude=location.latitude,
        longitude=location.longitude,
    )

    async with aiohttp.ClientSession() as session:
        async with session.get(url) as response:
            if response.status != 200:
                raise WeatherServiceError(
                    f"Error while fetching weather data: {response.status}"
                )

            raw_data = await response.json(content_type=None)

            return WeatherResponse.model_validate(raw_data)


def create_weather_fetcher(
    store: EntryStore,
    api_key: str,
    url_template: str = FORECAST_URL,
    freshness: timedelta = DEFAULT_FRESHNESS,
    on_error: ErrorSink | None = None,
) -> CachedFetcher[WeatherResponse]:
    async def produce(location: LatLon) -> WeatherResponse:
        return await fetch_weather_data(location, api_key, url_template)

    # stale weather is never shown silently, failures surface instead
    return CachedFetcher(
        key=WEATHER_CACHE_KEY,
        producer=produce,
        store=store,
        value_type=WeatherResponse,
        freshness=freshness,
        fallback_on_failure=False,
        on_error=on_error,
    )
