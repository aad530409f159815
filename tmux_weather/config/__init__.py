from .env import WeatherEnv
from .loader import (
    ConfigError,
    default_cache_dir,
    default_config_dir,
    load_api_key,
    load_config,
    resolve_paths,
)
from .models import AppConfig, AppPaths

__all__ = [
    "AppConfig",
    "AppPaths",
    "ConfigError",
    "WeatherEnv",
    "default_cache_dir",
    "default_config_dir",
    "load_api_key",
    "load_config",
    "resolve_paths",
]
