import json
import os
import tempfile
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from tmux_weather.cache.errors import CacheEntryNotFoundError, CorruptCacheEntryError
from tmux_weather.shared import LoggingMixin


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntryStore(LoggingMixin):
    """
    One JSON file per cache key inside a single directory.

    The file's modification time is the entry's last-write timestamp, so
    writes stamp it explicitly with the store clock.
    """

    def __init__(
        self,
        directory: Path,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.directory = Path(directory)
        self._clock = clock

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> tuple[Any, datetime]:
        path = self.path_for(key)

        try:
            raw = path.read_bytes()
            stat = path.stat()
        except FileNotFoundError as e:
            raise CacheEntryNotFoundError(key) from e

        try:
            value = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CorruptCacheEntryError(key, str(e)) from e

        last_modified = datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)
        return value, last_modified

    def write(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        payload = json.dumps(value, ensure_ascii=False)

        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(payload)
            written_at = self._clock().timestamp()
            os.utime(tmp_name, (written_at, written_at))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self.logger.debug("Wrote cache entry %s", path)

    def erase(self, key: str) -> None:
        path = self.path_for(key)
        path.unlink(missing_ok=True)
        self.logger.debug("Erased cache entry %s", path)
