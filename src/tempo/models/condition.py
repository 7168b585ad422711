"""Weather condition model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Condition(BaseModel):
    """One condition descriptor from the ``weather`` array (e.g. 800 / Clear / 맑음 / 01d)."""

    model_config = ConfigDict(frozen=True)

    id: int
    main: str
    description: str
    icon: str
