"""Root logger setup for the desktop app.

``PRINTFLOW_LOG_LEVEL`` (a level name or number) wins over everything else;
a truthy ``PRINTFLOW_DEBUG`` forces DEBUG when no level is given. Without
either, the saved ``debug_logging`` preference decides.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LEVEL_ENV = "PRINTFLOW_LOG_LEVEL"
DEBUG_ENV = "PRINTFLOW_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRUTHY = {"1", "true", "yes", "on"}


def _parse_level(text: str) -> int:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    level = logging.getLevelName(text.upper())
    # getLevelName answers "Level X" for unknown names.
    return level if isinstance(level, int) else logging.INFO


def env_level() -> Optional[int]:
    """Level forced by the environment, ``None`` when nothing is set."""
    raw = os.getenv(LEVEL_ENV, "")
    if raw.strip():
        return _parse_level(raw)
    if os.getenv(DEBUG_ENV, "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def env_requests_debug() -> bool:
    level = env_level()
    return level is not None and level <= logging.DEBUG


def configure_root(default_level: int = logging.INFO) -> int:
    """Install the compact console format once and set the root level."""
    level = env_level()
    if level is None:
        level = default_level
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    return level


def apply_preferences(debug_enabled: bool) -> int:
    """Apply the saved debug flag unless the environment forces a level."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level
