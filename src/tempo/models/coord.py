"""Geographic coordinate model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Coordinate(BaseModel):
    """A latitude/longitude pair in degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
