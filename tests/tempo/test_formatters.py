"""Tests for formatters.py — pure functions."""

from __future__ import annotations

from datetime import UTC, datetime

from tempo.formatters import NO_DATA_LINES, app_lines, format_temperature, widget_lines
from tempo.models import Coordinate, WeatherRecord
from tempo.widget import WeatherEntry

NOW = datetime(2025, 6, 17, 9, 30, tzinfo=UTC)


class TestFormatTemperature:
    def test_one_decimal(self) -> None:
        assert format_temperature(21.54) == "21.5°C"

    def test_negative(self) -> None:
        assert format_temperature(-3.0) == "-3.0°C"

    def test_none(self) -> None:
        assert format_temperature(None) == "—"


class TestAppLines:
    def test_no_location(self) -> None:
        assert app_lines(None, None) == ["Fetching location..."]

    def test_location_without_weather(self) -> None:
        lines = app_lines(Coordinate(lat=37.5665, lon=126.978), None)
        assert lines == ["Latitude: 37.5665", "Longitude: 126.978", "Fetching weather..."]

    def test_with_weather(self, sample_weather) -> None:
        record = WeatherRecord.model_validate(sample_weather)
        lines = app_lines(record.coord, record)
        assert lines[2:] == ["City: Seoul", "Temperature: 21.5°C", "Conditions: 맑음"]

    def test_unknown_conditions(self, sample_weather) -> None:
        sample_weather["weather"] = []
        record = WeatherRecord.model_validate(sample_weather)
        assert app_lines(record.coord, record)[-1] == "Conditions: Unknown"


class TestWidgetLines:
    def test_no_data(self) -> None:
        assert widget_lines(WeatherEntry(date=NOW)) == NO_DATA_LINES

    def test_no_data_returns_copy(self) -> None:
        lines = widget_lines(WeatherEntry(date=NOW))
        lines.append("x")
        assert NO_DATA_LINES == ["No weather data", "Open the app", "to refresh."]

    def test_with_data(self, sample_weather) -> None:
        record = WeatherRecord.model_validate(sample_weather)
        assert widget_lines(WeatherEntry(date=NOW, weather=record)) == ["Seoul", "21.5°C", "맑음"]
