"""Widget timeline provider backed by the shared weather snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Callable

from tempo.config import DEFAULT_REFRESH_MINUTES
from tempo.models.weather import WeatherRecord
from tempo.store import WeatherStoreBridge

DEFAULT_REFRESH_INTERVAL = timedelta(minutes=DEFAULT_REFRESH_MINUTES)


@dataclass(frozen=True)
class WeatherEntry:
    """What the widget shows at ``date``. ``weather`` is None in the no-data state."""

    date: datetime
    weather: WeatherRecord | None = None

    @property
    def has_data(self) -> bool:
        return self.weather is not None


@dataclass(frozen=True)
class Timeline:
    """Entries to render and when the host should ask for a new timeline."""

    entries: list[WeatherEntry] = field(default_factory=list)
    refresh_at: datetime | None = None


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WeatherTimelineProvider:
    """Answers the widget host's placeholder, snapshot and timeline requests.

    Only reads the shared store; it never fetches weather itself.
    """

    def __init__(
        self,
        bridge: WeatherStoreBridge,
        refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.bridge = bridge
        self.refresh_interval = refresh_interval
        self._clock = clock

    def placeholder(self) -> WeatherEntry:
        return WeatherEntry(date=self._clock())

    def snapshot(self) -> WeatherEntry:
        return WeatherEntry(date=self._clock(), weather=self.bridge.load())

    def timeline(self) -> Timeline:
        now = self._clock()
        entry = WeatherEntry(date=now, weather=self.bridge.load())
        return Timeline(entries=[entry], refresh_at=now + self.refresh_interval)
