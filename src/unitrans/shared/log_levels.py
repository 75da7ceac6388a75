"""Log level option shared by the server and client entry points."""

from __future__ import annotations

import logging
import os
from typing import Mapping

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "UNITRANS_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level_from_env(default: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the level named by ``UNITRANS_LOG_LEVEL``, or ``default``.

    Unknown names are logged and ignored so a bad environment never stops an
    entry point from starting.
    """

    environ = os.environ if environ is None else environ
    raw = environ.get(LOG_LEVEL_ENV)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Ignoring invalid value for %s: %s", LOG_LEVEL_ENV, raw)
        return default
    return level


__all__ = ["LOG_LEVELS", "LOG_LEVEL_ENV", "log_level_from_env"]
