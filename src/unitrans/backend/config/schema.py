"""Pydantic models describing the language catalog configuration."""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

AUTO_LANGUAGE = "auto"


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class LanguageEntry(ImmutableModel):
    """A single selectable language."""

    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    @field_validator("code", mode="before")
    @classmethod
    def _normalise_code(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class LanguageCatalogConfig(ImmutableModel):
    """Ordered list of languages offered to clients."""

    languages: Sequence[LanguageEntry]

    @model_validator(mode="after")
    def _validate_codes(self) -> LanguageCatalogConfig:
        if not self.languages:
            raise ConfigurationError("Language catalog must define at least one language")

        counts = Counter(entry.code for entry in self.languages)
        duplicates = sorted(code for code, count in counts.items() if count > 1)
        if duplicates:
            raise ConfigurationError(
                f"Duplicate language codes in catalog: {', '.join(duplicates)}"
            )
        return self

    def as_mapping(self) -> Mapping[str, str]:
        """Return a read-only ``code -> name`` view preserving catalog order."""

        return MappingProxyType({entry.code: entry.name for entry in self.languages})


__all__ = [
    "AUTO_LANGUAGE",
    "ConfigurationError",
    "ImmutableModel",
    "LanguageCatalogConfig",
    "LanguageEntry",
]
