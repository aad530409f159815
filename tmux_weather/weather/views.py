from pydantic import BaseModel

# =============================================================================
# API Response Models (forecast.io API Mappings)
# =============================================================================


class DailyResponse(BaseModel):
    summary: str


class CurrentlyResponse(BaseModel):
    icon: str
    # forecast.io sends a number, older payloads a numeric string
    temperature: float


class WeatherResponse(BaseModel):
    """Subset of the forecast.io response used by the status line."""

    daily: DailyResponse
    currently: CurrentlyResponse
