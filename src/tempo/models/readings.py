"""Main measurement block model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Readings(BaseModel):
    """Temperature, pressure and humidity readings (the ``main`` object)."""

    model_config = ConfigDict(frozen=True)

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
