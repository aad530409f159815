"""Location lookup via an external command."""

from .location import (
    LOCATION_CACHE_KEY,
    LatLon,
    LocationError,
    create_location_resolver,
    get_lat_lon,
)

__all__ = [
    "LOCATION_CACHE_KEY",
    "LatLon",
    "LocationError",
    "create_location_resolver",
    "get_lat_lon",
]
