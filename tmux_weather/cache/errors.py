class CacheError(Exception):
    """Base class for cache related failures."""


class CacheEntryNotFoundError(CacheError):
    def __init__(self, key: str):
        super().__init__(f"No cache entry for '{key}'")
        self.key = key


class CorruptCacheEntryError(CacheError):
    def __init__(self, key: str, reason: str):
        super().__init__(f"Cache entry for '{key}' is unreadable: {reason}")
        self.key = key


class ProducerError(CacheError):
    """
    Raised when the producer behind a cache key failed and no cached value
    may stand in for it. The producer's exception is chained as __cause__.
    """

    def __init__(self, key: str, cause: BaseException):
        super().__init__(f"Fetching '{key}' failed: {cause}")
        self.key = key
