from tmux_weather.weather.views import CurrentlyResponse, WeatherResponse

# =============================================================================
# Constants
# =============================================================================

_ICONS = {
    # TODO: sunrise/sunset variants for clear-day (🌇 🌅)
    "clear-day": "☀️",
    "clear-night": "🌙",
    "sleet": "☔",
    "rain": "☔",
    "snow": "❄️",
    "wind": "💨",
    "fog": "🌁",
    "cloudy": "☁️",
    "partly-cloudy-night": "⛅️",
    "partly-cloudy-day": "⛅️",
}

# (upper bound exclusive, tmux colour number)
_TEMPERATURE_BANDS = [
    (40, 27),
    (50, 39),
    (60, 50),
    (70, 220),
    (80, 208),
    (90, 202),
]
_HOTTEST_COLOUR = 196


def get_icon(currently: CurrentlyResponse) -> str:
    """Map a forecast icon code to a symbol, unknown codes pass through."""
    return _ICONS.get(currently.icon, currently.icon)


def temperature_colour(temperature: int) -> int:
    for upper_bound, colour in _TEMPERATURE_BANDS:
        if temperature < upper_bound:
            return colour
    return _HOTTEST_COLOUR


def format_temperature(currently: CurrentlyResponse) -> str:
    temperature = int(currently.temperature)
    return f"#[fg=colour{temperature_colour(temperature)}]{temperature}"


def format_status_line(weather: WeatherResponse) -> str:
    return f"{get_icon(weather.currently)} {format_temperature(weather.currently)}"
