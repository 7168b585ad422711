"""Shared snapshot model written for the widget."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from tempo.models.weather import WeatherRecord


class SharedWeatherSnapshot(BaseModel):
    """Latest weather record plus the time it was written to the shared store."""

    model_config = ConfigDict(frozen=True)

    weather: WeatherRecord
    written_at: datetime

    def dump_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def load_json(cls, raw: str | bytes) -> SharedWeatherSnapshot:
        return cls.model_validate_json(raw)
