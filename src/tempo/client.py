"""Public client classes for the OpenWeatherMap current-weather API."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from tempo._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from tempo._logging import log_api_call
from tempo._params import build_query_params
from tempo.config import API_KEY_PLACEHOLDER
from tempo.exceptions import TempoConfigError, TempoValidationError
from tempo.models.weather import WeatherRecord

CURRENT_WEATHER_ENDPOINT = "/weather"


def is_usable_api_key(api_key: str | None) -> bool:
    """Return False for empty keys and the unfilled placeholder."""
    if api_key is None:
        return False
    key = api_key.strip()
    return bool(key) and key != API_KEY_PLACEHOLDER


def _validate_record(data: Any) -> WeatherRecord:
    """Validate a decoded JSON body against the WeatherRecord model."""
    try:
        return WeatherRecord.model_validate(data)
    except ValidationError as exc:
        raise TempoValidationError(
            f"Failed to validate WeatherRecord response: {exc}",
            payload=json.dumps(data, ensure_ascii=False),
        ) from exc


class _ClientBase:
    def __init__(self, api_key: str, units: str, lang: str) -> None:
        self._api_key = api_key
        self.units = units
        self.lang = lang

    def _params(self, lat: float, lon: float) -> list[tuple[str, str]]:
        if not is_usable_api_key(self._api_key):
            raise TempoConfigError("OpenWeatherMap API key is not set")
        return build_query_params(
            lat=lat,
            lon=lon,
            appid=self._api_key,
            units=self.units,
            lang=self.lang,
        )


class WeatherClient(_ClientBase):
    """Synchronous client for the current-weather endpoint.

    Usage:
        with WeatherClient(api_key="...") as client:
            record = client.current_weather(37.5665, 126.978)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = "metric",
        lang: str = "kr",
    ) -> None:
        super().__init__(api_key, units, lang)
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def current_weather(self, lat: float, lon: float) -> WeatherRecord:
        """Get current conditions at a coordinate."""
        params = self._params(lat, lon)
        data = self._transport.get(CURRENT_WEATHER_ENDPOINT, params)
        return _validate_record(data)


class AsyncWeatherClient(_ClientBase):
    """Asynchronous client for the current-weather endpoint.

    Usage:
        async with AsyncWeatherClient(api_key="...") as client:
            record = await client.current_weather(37.5665, 126.978)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = "metric",
        lang: str = "kr",
    ) -> None:
        super().__init__(api_key, units, lang)
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def current_weather(self, lat: float, lon: float) -> WeatherRecord:
        """Get current conditions at a coordinate."""
        params = self._params(lat, lon)
        data = await self._transport.get(CURRENT_WEATHER_ENDPOINT, params)
        return _validate_record(data)
