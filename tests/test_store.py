"""Tests for the on-disk cache entry store."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from tmux_weather.cache import (
    CacheEntryNotFoundError,
    CorruptCacheEntryError,
    EntryStore,
)

from .conftest import T0


class TestEntryStoreRead:
    def test_read_returns_written_value(self, store: EntryStore) -> None:
        store.write("latlon", {"latitude": 1, "longitude": 2})

        value, last_modified = store.read("latlon")

        assert value == {"latitude": 1, "longitude": 2}
        assert last_modified == T0

    def test_last_modified_not_before_write_with_real_clock(
        self, cache_dir: Path
    ) -> None:
        store = EntryStore(cache_dir)
        before = datetime.now(timezone.utc)

        store.write("weather", {"a": 1})
        _, last_modified = store.read("weather")

        assert last_modified >= before
        assert last_modified.tzinfo is not None

    def test_missing_key_raises_not_found(self, store: EntryStore) -> None:
        with pytest.raises(CacheEntryNotFoundError) as exc_info:
            store.read("latlon")
        assert exc_info.value.key == "latlon"

    def test_undecodable_json_raises_corrupt(
        self, store: EntryStore, cache_dir: Path
    ) -> None:
        cache_dir.mkdir(parents=True)
        (cache_dir / "latlon.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(CorruptCacheEntryError):
            store.read("latlon")

    def test_invalid_utf8_raises_corrupt(
        self, store: EntryStore, cache_dir: Path
    ) -> None:
        cache_dir.mkdir(parents=True)
        (cache_dir / "latlon.json").write_bytes(b"\xff\xfe\x00")

        with pytest.raises(CorruptCacheEntryError):
            store.read("latlon")

    def test_read_does_not_modify_entry(self, store: EntryStore, clock) -> None:
        store.write("weather", [1, 2, 3])
        path = store.path_for("weather")
        before = path.stat().st_mtime_ns

        clock.advance(10)
        store.read("weather")
        store.read("weather")

        assert path.stat().st_mtime_ns == before


class TestEntryStoreWrite:
    def test_write_creates_directory(self, store: EntryStore, cache_dir: Path) -> None:
        assert not cache_dir.exists()

        store.write("latlon", {"latitude": 1.5, "longitude": -3})

        assert store.path_for("latlon") == cache_dir / "latlon.json"
        assert store.path_for("latlon").exists()

    def test_write_replaces_previous_entry(self, store: EntryStore, clock) -> None:
        store.write("weather", {"v": 1})
        clock.advance(30)
        store.write("weather", {"v": 2})

        value, last_modified = store.read("weather")

        assert value == {"v": 2}
        assert last_modified == clock()

    def test_write_leaves_no_temporary_files(
        self, store: EntryStore, cache_dir: Path
    ) -> None:
        store.write("weather", {"v": 1})
        store.write("weather", {"v": 2})

        assert [p.name for p in cache_dir.iterdir()] == ["weather.json"]

    def test_write_replaces_file_instead_of_rewriting_it(
        self, store: EntryStore
    ) -> None:
        store.write("weather", {"v": 1})
        path = store.path_for("weather")
        old_inode = path.stat().st_ino

        with path.open("rb") as reader:
            store.write("weather", {"v": 2})
            # an open reader keeps seeing the complete previous value
            assert reader.read() == b'{"v": 1}'

        assert path.stat().st_ino != old_inode
        assert store.read("weather")[0] == {"v": 2}

    def test_failed_serialization_keeps_previous_entry(
        self, store: EntryStore, cache_dir: Path
    ) -> None:
        store.write("weather", {"v": 1})

        with pytest.raises(TypeError):
            store.write("weather", {"v": object()})

        assert store.read("weather")[0] == {"v": 1}
        assert [p.name for p in cache_dir.iterdir()] == ["weather.json"]


class TestEntryStoreErase:
    def test_erase_removes_entry(self, store: EntryStore) -> None:
        store.write("latlon", {"latitude": 1, "longitude": 2})

        store.erase("latlon")

        with pytest.raises(CacheEntryNotFoundError):
            store.read("latlon")

    def test_erase_missing_key_is_noop(self, store: EntryStore) -> None:
        store.erase("latlon")
        store.erase("latlon")

    def test_erase_only_touches_its_key(self, store: EntryStore) -> None:
        store.write("latlon", {"latitude": 1, "longitude": 2})
        store.write("weather", {"v": 1})

        store.erase("latlon")

        assert store.read("weather")[0] == {"v": 1}
