"""Current weather record model."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict

from tempo.models.condition import Condition
from tempo.models.coord import Coordinate
from tempo.models.readings import Readings


class WeatherRecord(BaseModel):
    """Decoded current-weather response for one location.

    Keys the API sends that are not modelled here (``wind``, ``clouds``,
    ``sys``...) are ignored.
    """

    model_config = ConfigDict(frozen=True)

    coord: Coordinate
    weather: list[Condition]
    main: Readings
    name: str
    timezone: int | None = None
    dt: int | None = None

    @property
    def primary_condition(self) -> Condition | None:
        """First condition descriptor, or None if the array is empty."""
        return self.weather[0] if self.weather else None

    @property
    def description(self) -> str:
        condition = self.primary_condition
        return condition.description if condition else ""

    @property
    def observed_at(self) -> datetime | None:
        """Observation time as an aware UTC datetime, or None if missing."""
        if self.dt is None:
            return None
        return datetime.fromtimestamp(self.dt, tz=UTC)

    @property
    def utc_offset(self) -> timedelta | None:
        """Location's shift from UTC, or None if missing."""
        if self.timezone is None:
            return None
        return timedelta(seconds=self.timezone)
