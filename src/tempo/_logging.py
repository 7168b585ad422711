"""Logging for the tempo library and the file log of API/service calls."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LIBRARY_NAME = "tempo"
_API_LOGGER_NAME = "tempo.api"
_LOG_FILENAME = "api_calls.log"

logging.getLogger(LIBRARY_NAME).addHandler(logging.NullHandler())

# Resolved from settings on first use when left as None.
_LOG_DIR: str | None = None

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def configure_logging(level: str = "WARNING") -> None:
    """Send library log records to stderr at ``level``."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    lib_logger = logging.getLogger(LIBRARY_NAME)
    lib_logger.handlers.clear()
    lib_logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    lib_logger.addHandler(handler)


def _log_dir() -> str:
    if _LOG_DIR is not None:
        return _LOG_DIR
    from tempo.config import get_settings

    return str(get_settings().log_dir)


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        log_dir = _log_dir()
        os.makedirs(log_dir, exist_ok=True)

        _logger = logging.getLogger(_API_LOGGER_NAME)
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(
                os.path.join(log_dir, _LOG_FILENAME), encoding="utf-8",
            )
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _wrap(fn: F, prefix: str, with_args_on_result: bool) -> F:
    label = f"{prefix} " if prefix else ""

    def _ok(logger: logging.Logger, arg_str: str, start: float) -> None:
        elapsed = time.monotonic() - start
        if with_args_on_result:
            logger.info("%sOK: %s(%s) (%.3fs)", label, fn.__qualname__, arg_str, elapsed)
        else:
            logger.info("%sOK: %s -> %.3fs", label, fn.__qualname__, elapsed)

    def _fail(logger: logging.Logger, arg_str: str, start: float, exc: Exception) -> None:
        elapsed = time.monotonic() - start
        logger.error(
            "%sFAIL: %s(%s) -> %s: %s (%.3fs)",
            label, fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = _get_logger()
            arg_str = _arg_summary(args, kwargs)
            logger.info("%sCALL: %s(%s)", label, fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(logger, arg_str, start, exc)
                raise
            _ok(logger, arg_str, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _arg_summary(args, kwargs)
        logger.info("%sCALL: %s(%s)", label, fn.__qualname__, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(logger, arg_str, start, exc)
            raise
        _ok(logger, arg_str, start)
        return result

    return wrapper  # type: ignore[return-value]


def log_api_call(fn: F) -> F:
    """Decorator that logs HTTP-facing calls (sync or async) to the API log file."""
    return _wrap(fn, "", with_args_on_result=True)


def log_service_call(fn: F) -> F:
    """Decorator that logs orchestration steps to the API log file."""
    return _wrap(fn, "SERVICE", with_args_on_result=False)
