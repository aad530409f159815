from __future__ import annotations

import sys
import traceback
from datetime import datetime
from pathlib import Path

from tmux_weather.cache import EntryStore
from tmux_weather.reporting.notifier import DesktopNotifier
from tmux_weather.shared import LoggingMixin
from tmux_weather.weather import WEATHER_CACHE_KEY


def format_trace(error: BaseException) -> str:
    return "".join(traceback.format_exception(error)).rstrip()


def shorten_home(path: Path) -> str:
    home = str(Path.home())
    text = str(path)
    if text.startswith(home):
        return "~" + text[len(home):]
    return text


class ErrorReporter(LoggingMixin):
    """
    Makes failures visible without breaking the status bar: the trace goes to
    stderr, a desktop notification and the error log, and the status line
    shows where the log lives.
    """

    def __init__(
        self,
        error_log: Path,
        store: EntryStore,
        notifier: DesktopNotifier,
    ):
        self.error_log = Path(error_log)
        self._store = store
        self._notifier = notifier

    async def record(self, error: BaseException) -> None:
        trace = format_trace(error)
        print(trace, file=sys.stderr)
        await self._notifier.notify(trace)
        self._append_to_log(trace)

    async def report_failure(self, error: BaseException) -> None:
        await self.record(error)
        print(self.status_line())
        await self._discard_weather()

    def status_line(self) -> str:
        return f"#[fg=red]{shorten_home(self.error_log)}"

    def _append_to_log(self, trace: str) -> None:
        self.error_log.parent.mkdir(parents=True, exist_ok=True)
        with self.error_log.open("a", encoding="utf-8") as log:
            log.write(f"{datetime.now().astimezone().isoformat()}\n")
            log.write(f"{trace}\n")

    async def _discard_weather(self) -> None:
        try:
            self._store.erase(WEATHER_CACHE_KEY)
        except OSError as e:
            self.logger.error("Could not discard cached weather: %s", e)
            trace = format_trace(e)
            print(trace, file=sys.stderr)
            await self._notifier.notify(trace)
