"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import copy
import logging
from datetime import UTC, datetime

import pytest

import tempo._logging as tempo_logging
from tempo.store import AppGroupStore, WeatherStoreBridge

GROUP_ID = "group.com.example.tempo"
FIXED_NOW = datetime(2025, 6, 17, 9, 30, tzinfo=UTC)


SAMPLE_WEATHER = {
    "coord": {"lon": 126.978, "lat": 37.5665},
    "weather": [
        {"id": 800, "main": "Clear", "description": "맑음", "icon": "01d"},
    ],
    "base": "stations",
    "main": {
        "temp": 21.5,
        "feels_like": 21.1,
        "temp_min": 19.7,
        "temp_max": 22.8,
        "pressure": 1015,
        "humidity": 56,
    },
    "visibility": 10000,
    "wind": {"speed": 2.1, "deg": 250},
    "clouds": {"all": 0},
    "dt": 1718616600,
    "sys": {"country": "KR", "sunrise": 1718568920, "sunset": 1718622030},
    "timezone": 32400,
    "id": 1835848,
    "name": "Seoul",
    "cod": 200,
}

SAMPLE_WEATHER_BUSAN = {
    "coord": {"lon": 129.0403, "lat": 35.1028},
    "weather": [
        {"id": 500, "main": "Rain", "description": "실 비", "icon": "10d"},
        {"id": 701, "main": "Mist", "description": "박무", "icon": "50d"},
    ],
    "main": {
        "temp": 18.2,
        "feels_like": 18.4,
        "temp_min": 17.9,
        "temp_max": 18.9,
        "pressure": 1009,
        "humidity": 88,
    },
    "name": "Busan",
}


@pytest.fixture
def sample_weather() -> dict:
    return copy.deepcopy(SAMPLE_WEATHER)


@pytest.fixture
def sample_weather_busan() -> dict:
    """A response without the optional ``timezone`` and ``dt`` keys."""
    return copy.deepcopy(SAMPLE_WEATHER_BUSAN)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def store(tmp_path) -> AppGroupStore:
    return AppGroupStore(GROUP_ID, tmp_path / "app-groups", create=True)


@pytest.fixture
def bridge(store, fixed_clock) -> WeatherStoreBridge:
    return WeatherStoreBridge(store, clock=fixed_clock)


@pytest.fixture(autouse=True)
def api_log_dir(tmp_path):
    """Reset the call-log logger and redirect its file into tmp_path."""
    log_dir = tmp_path / "logs"
    old_logger = tempo_logging._logger
    old_dir = tempo_logging._LOG_DIR

    named_logger = logging.getLogger("tempo.api")
    named_logger.handlers.clear()

    tempo_logging._logger = None
    tempo_logging._LOG_DIR = str(log_dir)

    yield log_dir

    if tempo_logging._logger is not None:
        for h in tempo_logging._logger.handlers[:]:
            h.close()
            tempo_logging._logger.removeHandler(h)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    tempo_logging._logger = old_logger
    tempo_logging._LOG_DIR = old_dir
