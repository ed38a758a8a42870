"""Root logger setup plus the recomposition trace switch.

Every host composition is logged at DEBUG on ``RECOMPOSITION_LOGGER``.
Debug mode lowers only that logger, so tracing recompositions does not pull
the rest of the package (or third-party loggers) down to DEBUG.

Environment overrides:
  - COMPOSE_TUTORIAL_LOG_LEVEL: explicit root log level
  - COMPOSE_TUTORIAL_DEBUG: truthy -> recomposition tracing on
"""
from __future__ import annotations

import logging
import os
from typing import Optional

RECOMPOSITION_LOGGER = "compose_tutorial.recomposition"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VAR = "COMPOSE_TUTORIAL_LOG_LEVEL"
_DEBUG_ENV_VAR = "COMPOSE_TUTORIAL_DEBUG"


def _coerce_level(value: Optional[str], fallback: int) -> int:
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = getattr(logging, text.upper(), None)
    return candidate if isinstance(candidate, int) else fallback


def _env_level() -> Optional[int]:
    value = os.getenv(_LEVEL_ENV_VAR)
    if not value:
        return None
    return _coerce_level(value, logging.INFO)


def _env_tracing() -> bool:
    value = os.getenv(_DEBUG_ENV_VAR)
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


def recomposition_logger() -> logging.Logger:
    return logging.getLogger(RECOMPOSITION_LOGGER)


def set_recomposition_tracing(enabled: bool) -> bool:
    """Turn recomposition tracing on or off; off defers to the root level."""
    recomposition_logger().setLevel(logging.DEBUG if enabled else logging.NOTSET)
    return enabled


def recomposition_tracing_enabled() -> bool:
    return recomposition_logger().isEnabledFor(logging.DEBUG)


def configure_root(default_level: int | str = logging.INFO) -> int:
    """Configure the root logger and the recomposition trace from the environment.

    Returns the effective root level.
    """
    fallback = (
        _coerce_level(default_level, logging.INFO)
        if isinstance(default_level, str)
        else int(default_level)
    )
    effective = _env_level() or fallback

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    set_recomposition_tracing(_env_tracing())
    return effective


def apply_gui_preferences(debug_enabled: bool) -> bool:
    """Apply the settings debug flag; the environment can only add tracing.

    Returns True when recomposition tracing is on afterwards.
    """
    logging.getLogger().setLevel(_env_level() or logging.INFO)
    return set_recomposition_tracing(debug_enabled or _env_tracing())


def env_requests_debug() -> bool:
    """Return True if environment variables ask for debug output."""
    if _env_tracing():
        return True
    level = _env_level()
    return level is not None and level <= logging.DEBUG


__all__ = [
    "RECOMPOSITION_LOGGER",
    "apply_gui_preferences",
    "configure_root",
    "env_requests_debug",
    "recomposition_logger",
    "recomposition_tracing_enabled",
    "set_recomposition_tracing",
]
