import asyncio
import shutil
import sys

from tmux_weather.shared import LoggingMixin

NOTIFICATION_TITLE = "tmux-weather"


def _applescript_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class DesktopNotifier(LoggingMixin):
    """Posts desktop notifications through notify-send or osascript."""

    def __init__(self, enabled: bool = True, platform: str | None = None):
        self.enabled = enabled
        self._platform = platform or sys.platform

    def build_command(self, message: str) -> list[str]:
        if self._platform == "darwin":
            script = (
                f"display notification {_applescript_string(message)} "
                f"with title {_applescript_string(NOTIFICATION_TITLE)}"
            )
            return ["osascript", "-e", script]
        return ["notify-send", NOTIFICATION_TITLE, message]

    async def notify(self, message: str | None) -> None:
        if not self.enabled or not message:
            return

        command = self.build_command(message)
        if shutil.which(command[0]) is None:
            self.logger.debug("%s not available, skipping notification", command[0])
            return

        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await process.communicate()

        if process.returncode != 0:
            self.logger.warning(
                "%s exited with status %s: %s",
                command[0],
                process.returncode,
                stderr.decode(errors="replace").strip(),
            )
