import asyncio
import logging
from datetime import timedelta

from pydantic import BaseModel, ValidationError

from tmux_weather.cache import DEFAULT_FRESHNESS, CachedFetcher, EntryStore, ErrorSink

LOCATION_CACHE_KEY = "latlon"

logger = logging.getLogger(__name__)


class LocationError(RuntimeError):
    pass


class LatLon(BaseModel):
    latitude: float
    longitude: float


async def get_lat_lon(command: list[str]) -> LatLon:
    """
    Runs the location command and parses its JSON output
    """
    logger.debug("fetching lat/lon...")

    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise LocationError(f"Could not run {command[0]!r}: {e}") from e

    stdout, stderr = await process.communicate()

    if process.returncode != 0:
        raise LocationError(
            f"{command[0]!r} exited with status {process.returncode}: "
            f"{stderr.decode(errors='replace').strip()}"
        )

    try:
        return LatLon.model_validate_json(stdout)
    except ValidationError as e:
        raise LocationError(f"Unexpected output from {command[0]!r}: {e}") from e


def create_location_resolver(
    store: EntryStore,
    command: list[str],
    freshness: timedelta = DEFAULT_FRESHNESS,
    on_error: ErrorSink | None = None,
) -> CachedFetcher[LatLon]:
    async def produce() -> LatLon:
        return await get_lat_lon(command)

    # location rarely changes, an old fix beats no fix
    return CachedFetcher(
        key=LOCATION_CACHE_KEY,
        producer=produce,
        store=store,
        value_type=LatLon,
        freshness=freshness,
        fallback_on_failure=True,
        on_error=on_error,
    )
