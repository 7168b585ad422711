"""Location source: one coordinate per authorization, then stop updating."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol, Sequence

import httpx
from pydantic import BaseModel

from tempo.models.coord import Coordinate

logger = logging.getLogger(__name__)

IPAPI_URL = "http://ipapi.co/json/"


class AuthorizationStatus(str, Enum):
    """Location permission states reported by a provider."""

    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"
    AUTHORIZED_ALWAYS = "authorized_always"

    @property
    def is_authorized(self) -> bool:
        return self in (
            AuthorizationStatus.AUTHORIZED_WHEN_IN_USE,
            AuthorizationStatus.AUTHORIZED_ALWAYS,
        )


class LocationDelegate(Protocol):
    def authorization_changed(self, status: AuthorizationStatus) -> None: ...

    def locations_updated(self, coordinates: Sequence[Coordinate]) -> None: ...

    def location_failed(self, error: Exception) -> None: ...


class LocationProvider(Protocol):
    """Platform location service. Reports back through the delegate callbacks."""

    def request_authorization(self, delegate: LocationDelegate) -> None: ...

    def start_updating(self, delegate: LocationDelegate) -> None: ...

    def stop_updating(self) -> None: ...


class LocationSource:
    """Captures the first reported coordinate and hands it to ``on_coordinate``.

    Later updates are ignored; every update stops the provider so that at
    most one weather fetch follows per source.
    """

    def __init__(
        self,
        provider: LocationProvider,
        on_coordinate: Callable[[Coordinate], None],
    ) -> None:
        self._provider = provider
        self._on_coordinate = on_coordinate
        self.current: Coordinate | None = None
        self.status = AuthorizationStatus.NOT_DETERMINED

    def start(self) -> None:
        self._provider.request_authorization(self)

    def authorization_changed(self, status: AuthorizationStatus) -> None:
        self.status = status
        if status.is_authorized:
            logger.info("Location permission granted (%s)", status.value)
            self._provider.start_updating(self)
        elif status is AuthorizationStatus.NOT_DETERMINED:
            logger.info("Location permission not determined yet")
        else:
            logger.warning("Location permission %s; weather will not be fetched", status.value)

    def locations_updated(self, coordinates: Sequence[Coordinate]) -> None:
        if coordinates and self.current is None:
            self.current = coordinates[-1]
            logger.info("Current location: %s, %s", self.current.lat, self.current.lon)
            self._provider.stop_updating()
            self._on_coordinate(self.current)
            return
        self._provider.stop_updating()

    def location_failed(self, error: Exception) -> None:
        logger.error("Failed to get location: %s", error)


# ── Providers ────────────────────────────────────────────────────────────────


class StaticLocationProvider:
    """Provider that always reports the same coordinate."""

    def __init__(
        self,
        coordinate: Coordinate,
        status: AuthorizationStatus = AuthorizationStatus.AUTHORIZED_WHEN_IN_USE,
    ) -> None:
        self.coordinate = coordinate
        self.status = status
        self.updating = False

    def request_authorization(self, delegate: LocationDelegate) -> None:
        delegate.authorization_changed(self.status)

    def start_updating(self, delegate: LocationDelegate) -> None:
        self.updating = True
        delegate.locations_updated([self.coordinate])

    def stop_updating(self) -> None:
        self.updating = False


class _IPLocation(BaseModel):
    city: str | None = None
    latitude: float
    longitude: float


class IPGeolocationProvider:
    """Approximates the device position from its public IP address."""

    def __init__(self, url: str = IPAPI_URL, timeout: float = 10.0) -> None:
        self.url = url
        self.timeout = timeout
        self.updating = False

    def request_authorization(self, delegate: LocationDelegate) -> None:
        # IP lookup needs no user permission.
        delegate.authorization_changed(AuthorizationStatus.AUTHORIZED_WHEN_IN_USE)

    def start_updating(self, delegate: LocationDelegate) -> None:
        self.updating = True
        try:
            response = httpx.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            located = _IPLocation.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            self.updating = False
            delegate.location_failed(exc)
            return
        delegate.locations_updated([Coordinate(lat=located.latitude, lon=located.longitude)])

    def stop_updating(self) -> None:
        self.updating = False
