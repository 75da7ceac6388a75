"""Runtime settings for the translation proxy, sourced from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

logger = logging.getLogger(__name__)

MYMEMORY_URL = "https://api.mymemory.translated.net/get"
DEFAULT_CONTACT_EMAIL = "translator@example.com"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_allowed_origins(raw: str | None) -> frozenset[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return frozenset()

    return frozenset(origin.strip() for origin in raw.split(",") if origin.strip())


def _parse_flag(raw: str | None) -> bool:
    return (raw or "").strip().lower() in _TRUTHY


def _parse_positive_float(value: str | None, *, env: str) -> float | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        logger.warning("Ignoring invalid value for %s: %s", env, value)
        return None
    if parsed <= 0:
        logger.warning("Ignoring non-positive value for %s: %s", env, value)
        return None
    return parsed


def _parse_port(value: str | None, *, env: str) -> int:
    if value is None or not value.strip():
        return DEFAULT_PORT
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring invalid value for %s: %s", env, value)
        return DEFAULT_PORT
    if not 0 < parsed < 65536:
        logger.warning("Ignoring out-of-range value for %s: %s", env, value)
        return DEFAULT_PORT
    return parsed


@dataclass(frozen=True)
class ProxySettings:
    """Settings consumed by :func:`unitrans.backend.app.create_app`.

    ``upstream_timeout`` of ``None`` leaves the upstream call unbounded, and
    ``upstream_autodetect`` asks MyMemory to detect the source language rather
    than sending a same-language pair for ``auto`` requests.
    """

    allowed_origins: frozenset[str] = field(default_factory=frozenset)
    upstream_url: str = MYMEMORY_URL
    contact_email: str | None = DEFAULT_CONTACT_EMAIL
    upstream_timeout: float | None = None
    upstream_autodetect: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ProxySettings:
        """Build settings from ``UNITRANS_*`` environment variables."""

        env = os.environ if environ is None else environ

        contact_email = env.get("UNITRANS_CONTACT_EMAIL", DEFAULT_CONTACT_EMAIL).strip()

        return cls(
            allowed_origins=_parse_allowed_origins(env.get("UNITRANS_ALLOWED_ORIGINS")),
            upstream_url=env.get("UNITRANS_UPSTREAM_URL", "").strip() or MYMEMORY_URL,
            contact_email=contact_email or None,
            upstream_timeout=_parse_positive_float(
                env.get("UNITRANS_UPSTREAM_TIMEOUT"), env="UNITRANS_UPSTREAM_TIMEOUT"
            ),
            upstream_autodetect=_parse_flag(env.get("UNITRANS_UPSTREAM_AUTODETECT")),
            host=env.get("UNITRANS_HOST", "").strip() or DEFAULT_HOST,
            port=_parse_port(env.get("UNITRANS_PORT"), env="UNITRANS_PORT"),
        )


__all__ = [
    "DEFAULT_CONTACT_EMAIL",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "MYMEMORY_URL",
    "ProxySettings",
]
