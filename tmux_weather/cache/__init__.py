from .errors import (
    CacheEntryNotFoundError,
    CacheError,
    CorruptCacheEntryError,
    ProducerError,
)
from .policy import DEFAULT_FRESHNESS, CachedFetcher, ErrorSink
from .store import EntryStore, utcnow

__all__ = [
    "DEFAULT_FRESHNESS",
    "CacheEntryNotFoundError",
    "CacheError",
    "CachedFetcher",
    "CorruptCacheEntryError",
    "EntryStore",
    "ErrorSink",
    "ProducerError",
    "utcnow",
]
