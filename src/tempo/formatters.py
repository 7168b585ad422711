"""Text content for the in-app view and the widget."""

from __future__ import annotations

from tempo.models.coord import Coordinate
from tempo.models.weather import WeatherRecord
from tempo.widget import WeatherEntry

NO_DATA_LINES = ["No weather data", "Open the app", "to refresh."]


def format_temperature(value: float | None) -> str:
    """Format Celsius as 12.3°C or '—' if None."""
    if value is None:
        return "—"
    return f"{value:.1f}°C"


def _weather_lines(weather: WeatherRecord) -> list[str]:
    return [weather.name, format_temperature(weather.main.temp), weather.description]


def app_lines(location: Coordinate | None, weather: WeatherRecord | None) -> list[str]:
    if location is None:
        return ["Fetching location..."]
    lines = [f"Latitude: {location.lat}", f"Longitude: {location.lon}"]
    if weather is None:
        lines.append("Fetching weather...")
        return lines
    return lines + [
        f"City: {weather.name}",
        f"Temperature: {format_temperature(weather.main.temp)}",
        f"Conditions: {weather.description or 'Unknown'}",
    ]


def widget_lines(entry: WeatherEntry) -> list[str]:
    if entry.weather is None:
        return list(NO_DATA_LINES)
    return _weather_lines(entry.weather)
