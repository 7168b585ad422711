"""tempo data models."""

from tempo.models.condition import Condition
from tempo.models.coord import Coordinate
from tempo.models.readings import Readings
from tempo.models.snapshot import SharedWeatherSnapshot
from tempo.models.weather import WeatherRecord

__all__ = [
    "Condition",
    "Coordinate",
    "Readings",
    "SharedWeatherSnapshot",
    "WeatherRecord",
]
