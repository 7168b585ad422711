"""Query parameter builder for the OpenWeatherMap endpoints."""

from __future__ import annotations

from typing import Any


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Args:
        **kwargs: Keyword arguments where keys are parameter names. ``None``
                  values are skipped so optional parameters can be passed through.

    Returns:
        List of (key, value) tuples suitable for httpx params, in argument order.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, str(value)))
    return params
