"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from tempo.exceptions import (
    TempoAPIError,
    TempoConnectionError,
    TempoTimeoutError,
    TempoValidationError,
)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return parsed JSON."""
    if not response.is_success:
        raise TempoAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()  # type: ignore[no-any-return]
    except ValueError as exc:
        raise TempoValidationError(
            f"Response body is not valid JSON: {exc}",
            payload=response.text,
        ) from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise TempoConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise TempoTimeoutError(str(exc)) from exc
        except httpx.RequestError as exc:
            raise TempoConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise TempoConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise TempoTimeoutError(str(exc)) from exc
        except httpx.RequestError as exc:
            raise TempoConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
