import asyncio
import sys

import click

from tmux_weather.config import WeatherEnv
from tmux_weather.main import clear_cache
from tmux_weather.main import main as run_once
from tmux_weather.shared import configure_logging


@click.command()
@click.option(
    "--log-level",
    default=None,
    help="Logging level for stderr output (defaults to TMUX_WEATHER_LOG_LEVEL).",
)
@click.option(
    "--clear-cache",
    "clear",
    is_flag=True,
    help="Remove the cached location and weather, then exit.",
)
def main(log_level: str | None, clear: bool) -> None:
    """Print the current weather as a tmux status line segment."""
    env = WeatherEnv()
    configure_logging(log_level or env.log_level)

    if clear:
        clear_cache(env)
        click.echo("Cache cleared", err=True)
        return

    sys.exit(asyncio.run(run_once(env)))


if __name__ == "__main__":
    main()
