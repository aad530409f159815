import asyncio
import logging
import sys
from datetime import timedelta

from tmux_weather.cache import CachedFetcher, EntryStore
from tmux_weather.config import (
    AppConfig,
    AppPaths,
    WeatherEnv,
    load_api_key,
    load_config,
    resolve_paths,
)
from tmux_weather.location import LOCATION_CACHE_KEY, LatLon, create_location_resolver
from tmux_weather.reporting import DesktopNotifier, ErrorReporter, format_trace
from tmux_weather.weather import (
    WEATHER_CACHE_KEY,
    WeatherResponse,
    create_weather_fetcher,
    format_status_line,
)

logger = logging.getLogger(__name__)


async def run(
    location_resolver: CachedFetcher[LatLon],
    weather_fetcher: CachedFetcher[WeatherResponse],
) -> str:
    """Resolve location, fetch its weather and format the status line."""
    location = await location_resolver.fetch()
    logger.debug("lat %s, lon: %s", location.latitude, location.longitude)

    weather = await weather_fetcher.fetch(location)
    logger.debug("got weather: %s", weather.daily.summary)

    return format_status_line(weather)


async def run_with_config(
    paths: AppPaths,
    config: AppConfig,
    store: EntryStore,
    reporter: ErrorReporter,
) -> str:
    api_key = load_api_key(paths.api_key_file)
    freshness = timedelta(minutes=config.freshness_minutes)

    location_resolver = create_location_resolver(
        store,
        config.location_command,
        freshness=freshness,
        on_error=reporter.record,
    )
    weather_fetcher = create_weather_fetcher(
        store,
        api_key,
        url_template=config.forecast_url,
        freshness=freshness,
        on_error=reporter.record,
    )
    return await run(location_resolver, weather_fetcher)


async def main(env: WeatherEnv | None = None) -> int:
    """
    Performs one run and prints its line. Failures are reported instead of
    raised; the exit code is 1 only when reporting itself fails.
    """
    env = env or WeatherEnv()
    paths = resolve_paths(env)
    store = EntryStore(paths.cache_dir)
    notifier = DesktopNotifier()
    reporter = ErrorReporter(paths.error_log, store, notifier)

    try:
        paths.ensure()
        config = load_config(paths.config_file)
        notifier.enabled = config.notifications
        line = await run_with_config(paths, config, store, reporter)
    except Exception as e:
        return await _report(reporter, e)

    print(line)
    return 0


async def _report(reporter: ErrorReporter, error: Exception) -> int:
    try:
        await reporter.report_failure(error)
    except Exception as reporting_error:
        print(format_trace(reporting_error), file=sys.stderr)
        return 1
    return 0


def clear_cache(env: WeatherEnv | None = None) -> None:
    store = EntryStore(resolve_paths(env or WeatherEnv()).cache_dir)
    for key in (LOCATION_CACHE_KEY, WEATHER_CACHE_KEY):
        store.erase(key)


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
