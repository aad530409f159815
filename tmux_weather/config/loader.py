from __future__ import annotations

import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from tmux_weather.config.env import WeatherEnv
from tmux_weather.config.models import AppConfig, AppPaths, ForecastIOToken

APP_NAME = "tmux-weather"


class ConfigError(RuntimeError):
    pass


def default_cache_dir(platform: str | None = None) -> Path:
    platform = platform or sys.platform
    base = "Library/Caches" if platform == "darwin" else ".cache"
    return Path.home() / base / APP_NAME


def default_config_dir() -> Path:
    return Path.home() / ".config" / APP_NAME


def resolve_paths(env: WeatherEnv) -> AppPaths:
    return AppPaths(
        cache_dir=env.cache_dir or default_cache_dir(),
        config_dir=env.config_dir or default_config_dir(),
    )


def load_config(path: str | Path) -> AppConfig:
    """
    Load the optional YAML settings file.

    A missing file yields the defaults.

    Raises:
        ConfigError: for YAML syntax errors or invalid values
    """
    p = Path(path)
    if not p.exists():
        return AppConfig()

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config values in {p}:\n{e}") from e


def load_api_key(path: str | Path) -> str:
    """
    Read the forecast.io token from a JSON file shaped like {"token": "..."}.

    Raises:
        ConfigError: if the file is missing or malformed
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"API key file not found: {p}") from e

    try:
        return ForecastIOToken.model_validate_json(raw).token
    except ValidationError as e:
        raise ConfigError(f"Invalid API key file {p}:\n{e}") from e
