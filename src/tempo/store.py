"""App-group key-value store shared by the app and widget processes."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from tempo._logging import log_service_call
from tempo.config import DEFAULT_STORE_KEY
from tempo.exceptions import StoreUnavailableError, TempoStoreError
from tempo.models.snapshot import SharedWeatherSnapshot
from tempo.models.weather import WeatherRecord

logger = logging.getLogger(__name__)


class AppGroupStore:
    """String key-value bucket identified by an app-group id.

    The bucket is a single JSON document, ``<root>/<group_id>.json``. It is
    available once the ``root`` container exists; the app process provisions it
    with ``create=True`` while readers open it as-is.
    """

    def __init__(self, group_id: str, root: Path | str, create: bool = False) -> None:
        self.group_id = group_id
        self.root = Path(root)
        if create:
            self.root.mkdir(parents=True, exist_ok=True)

    def __repr__(self) -> str:
        return f"AppGroupStore({self.group_id!r}, {str(self.root)!r})"

    @property
    def path(self) -> Path:
        return self.root / f"{self.group_id}.json"

    @property
    def available(self) -> bool:
        return self.root.is_dir()

    def _require_available(self) -> None:
        if not self.available:
            raise StoreUnavailableError(f"App group container {self.root} is not available")

    def _read_all(self) -> dict[str, str]:
        self._require_available()
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise TempoStoreError(f"Cannot read {self.path}: {exc}") from exc
        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise TempoStoreError(f"Corrupt app group file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise TempoStoreError(f"Corrupt app group file {self.path}: not an object")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self._require_available()
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.root, prefix=f".{self.group_id}.", suffix=".tmp")
        except OSError as exc:
            raise TempoStoreError(f"Cannot write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise TempoStoreError(f"Cannot write {self.path}: {exc}") from exc

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StoreUnavailableError:
            raise
        except TempoStoreError as exc:
            logger.warning("Overwriting unreadable app group file: %s", exc)
            data = {}
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WeatherStoreBridge:
    """Writes the latest weather record to the app group and reads it back.

    Failures are logged and reported as ``False`` / ``None``; nothing raises.
    """

    def __init__(
        self,
        store: AppGroupStore,
        key: str = DEFAULT_STORE_KEY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.store = store
        self.key = key
        self._clock = clock

    @log_service_call
    def save(self, record: WeatherRecord) -> bool:
        snapshot = SharedWeatherSnapshot(weather=record, written_at=self._clock())
        try:
            self.store.set(self.key, snapshot.dump_json())
        except StoreUnavailableError as exc:
            logger.error("App group store unavailable, weather not saved: %s", exc)
            return False
        except (TempoStoreError, ValueError, TypeError) as exc:
            logger.error("Failed to save weather to app group: %s", exc)
            return False
        logger.info("Saved weather for %s to app group %s", record.name, self.store.group_id)
        return True

    def load_snapshot(self) -> SharedWeatherSnapshot | None:
        try:
            raw = self.store.get(self.key)
        except StoreUnavailableError as exc:
            logger.warning("App group store unavailable: %s", exc)
            return None
        except TempoStoreError as exc:
            logger.error("Failed to read app group store: %s", exc)
            return None
        if raw is None:
            logger.info("No saved weather found in app group %s", self.store.group_id)
            return None
        try:
            return SharedWeatherSnapshot.load_json(raw)
        except ValidationError as exc:
            logger.error("Failed to decode saved weather: %s", exc)
            return None

    def load(self) -> WeatherRecord | None:
        snapshot = self.load_snapshot()
        return snapshot.weather if snapshot is not None else None
