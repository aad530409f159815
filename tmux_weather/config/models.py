from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

ERROR_LOG_NAME = "weather.log"
API_KEY_FILE_NAME = "forecastio.json"
CONFIG_FILE_NAME = "config.yaml"

FORECAST_URL = "https://api.forecast.io/forecast/{api_key}/{latitude},{longitude}"


class AppPaths(BaseModel):
    """Directories resolved once at startup and handed to every component."""

    cache_dir: Path
    config_dir: Path

    @property
    def error_log(self) -> Path:
        return self.cache_dir / ERROR_LOG_NAME

    @property
    def api_key_file(self) -> Path:
        return self.config_dir / API_KEY_FILE_NAME

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def ensure(self) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.config_dir.mkdir(parents=True, exist_ok=True)


class AppConfig(BaseModel):
    """Optional user settings from config.yaml"""

    freshness_minutes: int = Field(default=20, ge=1)
    location_command: list[str] = Field(default_factory=lambda: ["latlon"])
    forecast_url: str = FORECAST_URL
    notifications: bool = True

    @field_validator("location_command", mode="before")
    @classmethod
    def _split_command(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.split()
        return v

    @field_validator("location_command")
    @classmethod
    def _require_program(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("location_command must not be empty")
        return v


class ForecastIOToken(BaseModel):
    token: str = Field(min_length=1)
