from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from tmux_weather.cache.errors import (
    CacheEntryNotFoundError,
    CorruptCacheEntryError,
    ProducerError,
)
from tmux_weather.cache.store import EntryStore, utcnow
from tmux_weather.shared import LoggingMixin

T = TypeVar("T")

ErrorSink = Callable[[BaseException], Awaitable[None]]

DEFAULT_FRESHNESS = timedelta(minutes=20)


class CachedFetcher(LoggingMixin, Generic[T]):
    """
    Serves a cached value while it is fresh, refetches it once it expires
    and, when ``fallback_on_failure`` is set, serves the last known-good
    value if the refetch fails.

    Freshness and fallback are independent: any producer can combine them.
    """

    def __init__(
        self,
        key: str,
        producer: Callable[..., Awaitable[T]],
        store: EntryStore,
        value_type: type[T],
        freshness: timedelta = DEFAULT_FRESHNESS,
        fallback_on_failure: bool = False,
        on_error: ErrorSink | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.key = key
        self.freshness = freshness
        self.fallback_on_failure = fallback_on_failure
        self._producer = producer
        self._store = store
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)
        self._on_error = on_error
        self._clock = clock

    async def fetch(self, *args: Any) -> T:
        try:
            value, last_modified = self._read()
        except CacheEntryNotFoundError:
            self.logger.debug("No cached '%s'", self.key)
        except (CorruptCacheEntryError, OSError) as e:
            await self._recover_from_unreadable_entry(e)
        else:
            age = self._clock() - last_modified
            if age < self.freshness:
                self.logger.debug("Serving cached '%s' (age %s)", self.key, age)
                return value
            self.logger.debug("Cached '%s' is stale (age %s)", self.key, age)

        return await self._produce(*args)

    async def _produce(self, *args: Any) -> T:
        try:
            value = await self._producer(*args)
        except Exception as e:
            if not self.fallback_on_failure:
                raise ProducerError(self.key, e) from e
            return self._fallback(e)

        try:
            self._store.write(self.key, self._adapter.dump_python(value, mode="json"))
        except OSError as e:
            self.logger.warning("Could not cache '%s': %s", self.key, e)
        return value

    def _fallback(self, failure: Exception) -> T:
        try:
            value, last_modified = self._read()
        except (CacheEntryNotFoundError, CorruptCacheEntryError, OSError) as e:
            self.logger.debug("Nothing to fall back to for '%s': %s", self.key, e)
            raise ProducerError(self.key, failure) from failure

        self.logger.warning(
            "Fetching '%s' failed (%s), using value cached at %s",
            self.key,
            failure,
            last_modified.isoformat(),
        )
        return value

    def _read(self) -> tuple[T, datetime]:
        raw, last_modified = self._store.read(self.key)
        try:
            value = self._adapter.validate_python(raw)
        except ValidationError as e:
            raise CorruptCacheEntryError(self.key, str(e)) from e
        return value, last_modified

    async def _recover_from_unreadable_entry(self, error: Exception) -> None:
        self.logger.error("Discarding cached '%s': %s", self.key, error)
        try:
            if self._on_error is not None:
                await self._on_error(error)
        finally:
            self._store.erase(self.key)
