"""Tests for the location source and providers."""

from __future__ import annotations

import logging

import httpx
import pytest
import respx

from tempo.location import (
    IPAPI_URL,
    AuthorizationStatus,
    IPGeolocationProvider,
    LocationSource,
    StaticLocationProvider,
)
from tempo.models import Coordinate

SEOUL = Coordinate(lat=37.5665, lon=126.978)
BUSAN = Coordinate(lat=35.1028, lon=129.0403)


class _RecordingProvider:
    """Provider driven by the test: records calls, reports nothing on its own."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def request_authorization(self, delegate) -> None:
        self.calls.append("request_authorization")

    def start_updating(self, delegate) -> None:
        self.calls.append("start_updating")

    def stop_updating(self) -> None:
        self.calls.append("stop_updating")


@pytest.fixture
def provider() -> _RecordingProvider:
    return _RecordingProvider()


@pytest.fixture
def emitted() -> list[Coordinate]:
    return []


@pytest.fixture
def source(provider, emitted) -> LocationSource:
    return LocationSource(provider, on_coordinate=emitted.append)


class TestAuthorization:
    def test_start_requests_authorization(self, source, provider) -> None:
        source.start()
        assert provider.calls == ["request_authorization"]

    @pytest.mark.parametrize(
        "status",
        [AuthorizationStatus.AUTHORIZED_WHEN_IN_USE, AuthorizationStatus.AUTHORIZED_ALWAYS],
    )
    def test_authorized_starts_updating(self, source, provider, status) -> None:
        source.authorization_changed(status)
        assert provider.calls == ["start_updating"]
        assert source.status is status

    @pytest.mark.parametrize(
        "status",
        [AuthorizationStatus.DENIED, AuthorizationStatus.RESTRICTED],
    )
    def test_denied_never_fetches(self, source, provider, emitted, status, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="tempo.location"):
            source.authorization_changed(status)
        assert provider.calls == []
        assert emitted == []
        assert status.value in caplog.text

    def test_not_determined_waits(self, source, provider) -> None:
        source.authorization_changed(AuthorizationStatus.NOT_DETERMINED)
        assert provider.calls == []


class TestLocationUpdates:
    def test_emits_last_coordinate_once(self, source, provider, emitted) -> None:
        source.locations_updated([BUSAN, SEOUL])
        assert emitted == [SEOUL]
        assert source.current == SEOUL
        assert provider.calls == ["stop_updating"]

    def test_later_updates_ignored(self, source, provider, emitted) -> None:
        source.locations_updated([SEOUL])
        source.locations_updated([BUSAN])
        assert emitted == [SEOUL]
        assert source.current == SEOUL
        assert provider.calls == ["stop_updating", "stop_updating"]

    def test_empty_update(self, source, provider, emitted) -> None:
        source.locations_updated([])
        assert emitted == []
        assert source.current is None
        assert provider.calls == ["stop_updating"]

    def test_stops_before_emitting(self, provider) -> None:
        seen: list[list[str]] = []
        source = LocationSource(provider, on_coordinate=lambda c: seen.append(list(provider.calls)))
        source.locations_updated([SEOUL])
        assert seen == [["stop_updating"]]

    def test_failure_is_logged_only(self, source, provider, emitted, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger="tempo.location"):
            source.location_failed(RuntimeError("kCLErrorLocationUnknown"))
        assert "kCLErrorLocationUnknown" in caplog.text
        assert emitted == []
        assert provider.calls == []


class TestStaticLocationProvider:
    def test_full_flow(self, emitted) -> None:
        provider = StaticLocationProvider(SEOUL)
        LocationSource(provider, on_coordinate=emitted.append).start()
        assert emitted == [SEOUL]
        assert provider.updating is False

    def test_denied(self, emitted) -> None:
        provider = StaticLocationProvider(SEOUL, status=AuthorizationStatus.DENIED)
        LocationSource(provider, on_coordinate=emitted.append).start()
        assert emitted == []


class TestIPGeolocationProvider:
    @respx.mock
    def test_located(self, emitted) -> None:
        respx.get(IPAPI_URL).mock(
            return_value=httpx.Response(
                200, json={"city": "Seoul", "latitude": 37.5665, "longitude": 126.978},
            )
        )
        provider = IPGeolocationProvider()
        LocationSource(provider, on_coordinate=emitted.append).start()
        assert emitted == [SEOUL]
        assert provider.updating is False

    @respx.mock
    def test_http_error(self, emitted, caplog) -> None:
        respx.get(IPAPI_URL).mock(return_value=httpx.Response(429, text="RateLimited"))
        provider = IPGeolocationProvider()
        with caplog.at_level(logging.ERROR, logger="tempo.location"):
            LocationSource(provider, on_coordinate=emitted.append).start()
        assert emitted == []
        assert "Failed to get location" in caplog.text

    @respx.mock
    def test_connection_error(self, emitted) -> None:
        respx.get(IPAPI_URL).mock(side_effect=httpx.ConnectError("offline"))
        provider = IPGeolocationProvider()
        LocationSource(provider, on_coordinate=emitted.append).start()
        assert emitted == []
        assert provider.updating is False

    @respx.mock
    def test_malformed_body(self, emitted) -> None:
        respx.get(IPAPI_URL).mock(
            return_value=httpx.Response(200, json={"error": True, "reason": "Reserved IP"})
        )
        provider = IPGeolocationProvider()
        LocationSource(provider, on_coordinate=emitted.append).start()
        assert emitted == []
