"""Runtime configuration loaded from ``TEMPO_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_PLACEHOLDER = "YOUR_OPENWEATHERMAP_API_KEY"
DEFAULT_APP_GROUP_ID = "group.com.yourcompany.tempo"
DEFAULT_STORE_KEY = "savedWeatherData"
DEFAULT_REFRESH_MINUTES = 15

_TEMPO_HOME = Path.home() / ".tempo"


class TempoSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TEMPO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = API_KEY_PLACEHOLDER
    base_url: str = "https://api.openweathermap.org/data/2.5"
    units: str = "metric"
    lang: str = "kr"
    timeout: float = 30.0

    app_group_id: str = DEFAULT_APP_GROUP_ID
    store_key: str = DEFAULT_STORE_KEY
    store_root: Path = _TEMPO_HOME / "app-groups"

    refresh_interval_minutes: int = DEFAULT_REFRESH_MINUTES

    # Fixed position instead of IP geolocation when both are set.
    latitude: float | None = None
    longitude: float | None = None

    log_level: str = "WARNING"
    log_dir: Path = _TEMPO_HOME / "logs"

    @property
    def has_fixed_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@lru_cache(maxsize=1)
def get_settings() -> TempoSettings:
    """Return the process-wide settings, loaded once."""
    return TempoSettings()
