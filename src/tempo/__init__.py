"""tempo — current-location weather for an app and its home-screen widget."""

from tempo.app import WeatherSession, widget_provider_from_settings
from tempo.client import AsyncWeatherClient, WeatherClient
from tempo.config import TempoSettings, get_settings
from tempo.exceptions import (
    StoreUnavailableError,
    TempoAPIError,
    TempoConfigError,
    TempoConnectionError,
    TempoError,
    TempoStoreError,
    TempoTimeoutError,
    TempoValidationError,
)
from tempo.fetcher import AsyncWeatherFetcher, WeatherFetcher
from tempo.location import AuthorizationStatus, LocationSource
from tempo.store import AppGroupStore, WeatherStoreBridge
from tempo.widget import Timeline, WeatherEntry, WeatherTimelineProvider

__all__ = [
    "AppGroupStore",
    "AsyncWeatherClient",
    "AsyncWeatherFetcher",
    "AuthorizationStatus",
    "LocationSource",
    "StoreUnavailableError",
    "TempoAPIError",
    "TempoConfigError",
    "TempoConnectionError",
    "TempoError",
    "TempoSettings",
    "TempoStoreError",
    "TempoTimeoutError",
    "TempoValidationError",
    "Timeline",
    "WeatherClient",
    "WeatherEntry",
    "WeatherFetcher",
    "WeatherSession",
    "WeatherStoreBridge",
    "WeatherTimelineProvider",
    "get_settings",
    "widget_provider_from_settings",
]

__version__ = "0.1.0"
