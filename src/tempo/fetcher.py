"""Weather fetch orchestration: one request per coordinate, log and stop on failure."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from tempo._logging import log_service_call
from tempo.client import AsyncWeatherClient, WeatherClient
from tempo.exceptions import TempoConfigError, TempoError, TempoValidationError
from tempo.models.coord import Coordinate
from tempo.models.weather import WeatherRecord

logger = logging.getLogger(__name__)

Publish = Callable[[WeatherRecord], None]
Dispatch = Callable[[Callable[[], None]], None]


def _call_inline(fn: Callable[[], None]) -> None:
    fn()


def _log_failure(exc: TempoError) -> None:
    if isinstance(exc, TempoConfigError):
        logger.warning("Set the OpenWeatherMap API key to fetch weather: %s", exc)
    elif isinstance(exc, TempoValidationError):
        logger.error("Failed to decode weather response: %s", exc)
        if exc.payload is not None:
            logger.error("Received payload: %s", exc.payload)
    else:
        logger.error("Weather request failed: %s", exc)


class WeatherFetcher:
    """Fetches current weather and publishes it through ``dispatch``.

    ``dispatch`` decides where ``on_publish`` runs. The default runs it on the
    calling thread; a UI loop passes e.g. ``loop.call_soon_threadsafe``.
    """

    def __init__(
        self,
        client: WeatherClient,
        on_publish: Publish,
        dispatch: Dispatch | None = None,
    ) -> None:
        self.client = client
        self.on_publish = on_publish
        self.dispatch = dispatch or _call_inline

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @log_service_call
    def fetch(self, coordinate: Coordinate) -> WeatherRecord | None:
        try:
            record = self.client.current_weather(coordinate.lat, coordinate.lon)
        except TempoError as exc:
            _log_failure(exc)
            return None
        logger.info("Fetched weather: %s, %.1f°", record.name, record.main.temp)
        self.dispatch(lambda: self.on_publish(record))
        return record

    def fetch_in_background(self, coordinate: Coordinate) -> threading.Thread:
        """Run :meth:`fetch` on a daemon worker thread and return it."""
        worker = threading.Thread(
            target=self.fetch,
            args=(coordinate,),
            name="tempo-weather-fetch",
            daemon=True,
        )
        worker.start()
        return worker


class AsyncWeatherFetcher:
    """asyncio variant; publishes on the running loop once the request completes."""

    def __init__(self, client: AsyncWeatherClient, on_publish: Publish) -> None:
        self.client = client
        self.on_publish = on_publish

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @log_service_call
    async def fetch(self, coordinate: Coordinate) -> WeatherRecord | None:
        try:
            record = await self.client.current_weather(coordinate.lat, coordinate.lon)
        except TempoError as exc:
            _log_failure(exc)
            return None
        logger.info("Fetched weather: %s, %.1f°", record.name, record.main.temp)
        self.on_publish(record)
        return record
