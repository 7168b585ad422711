"""App session: location → weather fetch → shared store."""

from __future__ import annotations

import logging
import threading
from datetime import timedelta

from tempo.client import WeatherClient
from tempo.config import TempoSettings
from tempo.fetcher import Dispatch, WeatherFetcher
from tempo.location import (
    IPGeolocationProvider,
    LocationProvider,
    LocationSource,
    StaticLocationProvider,
)
from tempo.models.coord import Coordinate
from tempo.models.weather import WeatherRecord
from tempo.store import AppGroupStore, WeatherStoreBridge
from tempo.widget import WeatherTimelineProvider

logger = logging.getLogger(__name__)


class WeatherSession:
    """State of the main app: the locked-in coordinate and the latest weather.

    Each published record replaces ``weather`` and is written to the shared
    store for the widget.
    """

    def __init__(
        self,
        provider: LocationProvider,
        client: WeatherClient,
        bridge: WeatherStoreBridge,
        background: bool = False,
        dispatch: Dispatch | None = None,
    ) -> None:
        self.bridge = bridge
        self.background = background
        self.current_location: Coordinate | None = None
        self.worker: threading.Thread | None = None
        self.weather: WeatherRecord | None = None
        self.fetcher = WeatherFetcher(client, on_publish=self._publish, dispatch=dispatch)
        self.location = LocationSource(provider, on_coordinate=self._located)

    @classmethod
    def from_settings(
        cls,
        settings: TempoSettings,
        provider: LocationProvider | None = None,
        background: bool = False,
    ) -> WeatherSession:
        if provider is None:
            if settings.has_fixed_location:
                provider = StaticLocationProvider(
                    Coordinate(lat=settings.latitude, lon=settings.longitude),  # type: ignore[arg-type]
                )
            else:
                provider = IPGeolocationProvider()
        client = WeatherClient(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            units=settings.units,
            lang=settings.lang,
        )
        store = AppGroupStore(settings.app_group_id, settings.store_root, create=True)
        return cls(
            provider=provider,
            client=client,
            bridge=WeatherStoreBridge(store, key=settings.store_key),
            background=background,
        )

    def start(self) -> None:
        self.location.start()

    def close(self) -> None:
        self.fetcher.client.close()

    def _located(self, coordinate: Coordinate) -> None:
        self.current_location = coordinate
        if self.background:
            self.worker = self.fetcher.fetch_in_background(coordinate)
        else:
            self.fetcher.fetch(coordinate)

    def _publish(self, record: WeatherRecord) -> None:
        logger.info("Weather updated for %s", record.name)
        self.weather = record
        self.bridge.save(record)


def widget_provider_from_settings(settings: TempoSettings) -> WeatherTimelineProvider:
    """Build the widget side: read-only store access, no weather client."""
    store = AppGroupStore(settings.app_group_id, settings.store_root)
    return WeatherTimelineProvider(
        WeatherStoreBridge(store, key=settings.store_key),
        refresh_interval=timedelta(minutes=settings.refresh_interval_minutes),
    )
