"""Logging for textkit, built on telelog.

``configure(...)`` -- pick the minimum level, directly or through a preset
``get_logger(name)`` -- fetch (and cache) a telelog logger
``record_event(name, ...)`` -- emit ``event::<name>`` with key/value pairs
``span(name, ...)`` -- time a block, reporting failures at error level

The starting level comes from ``TEXTKIT_LOG_LEVEL`` (default ``WARNING``).
"""

from __future__ import annotations

import os
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional

from telelog import create_logger  # type: ignore[import]

ENV_PREFIX = "TEXTKIT_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "textkit")

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}
PRESETS: Dict[str, str] = {
    "development": "debug",
    "production": "warning",
    "performance": "debug",
}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_min_level = "warning"


def _normalize_level(level: str) -> str:
    key = str(level).lower()
    if key not in LEVELS:
        raise ValueError(f"Unsupported log level '{level}'.")
    return key


def configure(*, level: Optional[str] = None, preset: Optional[str] = None) -> None:
    """Set the minimum level events must reach to be written.

    ``level`` and ``preset`` are mutually exclusive; with neither, the level
    is read from the environment again.
    """

    global _min_level
    if level and preset:
        raise ValueError("Provide either `level` or `preset`, not both.")

    if preset:
        key = preset.lower()
        if key not in PRESETS:
            raise ValueError(
                f"Unknown preset '{preset}'. Expected one of: {', '.join(PRESETS)}."
            )
        _min_level = PRESETS[key]
    else:
        _min_level = _normalize_level(
            level or os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "warning")
        )


def active_level() -> str:
    return _min_level


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = create_logger(logger_name)
    return _LOGGER_CACHE[logger_name]


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Write ``event::<name> | key=value ...`` unless ``level`` is filtered out."""

    key = _normalize_level(level)
    if LEVELS[key] < LEVELS[_min_level]:
        return
    payload = " | ".join(
        [f"event::{name}"] + [f"{k}={v}" for k, v in (data or {}).items()]
    )
    getattr(get_logger(logger_name), key)(payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Time the block; log ``span.done`` at debug or ``span.fail`` at error."""

    started = time.perf_counter()
    details = {"span": name, **(metadata or {})}
    try:
        yield
    except Exception as exc:
        record_event(
            "span.fail",
            level="error",
            data={**details, "reason": exc},
            logger_name=logger_name,
        )
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    record_event(
        "span.done",
        level="debug",
        data={**details, "elapsed_ms": f"{elapsed_ms:.3f}"},
        logger_name=logger_name,
    )


configure()

__all__ = [
    "LEVELS",
    "PRESETS",
    "active_level",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
