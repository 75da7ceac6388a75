"""Configuration loader for the static language catalog."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .schema import AUTO_LANGUAGE, ConfigurationError, LanguageCatalogConfig, LanguageEntry

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
CATALOG_FILE = CONFIG_DIRECTORY / "languages.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def parse_language_catalog(raw: Mapping[str, Any]) -> LanguageCatalogConfig:
    """Validate a raw catalog payload, wrapping schema errors."""

    try:
        return LanguageCatalogConfig.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Language catalog validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_language_catalog() -> LanguageCatalogConfig:
    """Load and cache the catalog shipped with the package."""

    if not CATALOG_FILE.exists():
        raise FileNotFoundError(f"Language catalog not found: {CATALOG_FILE}")

    return parse_language_catalog(_load_yaml(CATALOG_FILE))


def get_languages() -> Mapping[str, str]:
    """Return the read-only ``code -> name`` mapping served to clients."""

    return load_language_catalog().as_mapping()


__all__ = [
    "AUTO_LANGUAGE",
    "CATALOG_FILE",
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "LanguageCatalogConfig",
    "LanguageEntry",
    "get_languages",
    "load_language_catalog",
    "parse_language_catalog",
]
