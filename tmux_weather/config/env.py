from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class WeatherEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TMUX_WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    cache_dir: Path | None = None
    config_dir: Path | None = None
