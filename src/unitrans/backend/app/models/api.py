"""Pydantic models describing the public API surface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from unitrans.backend.config.schema import AUTO_LANGUAGE
from unitrans.shared.models import TranslationResult

__all__ = [
    "MISSING_FIELDS_ERROR",
    "TranslationRequest",
    "TranslationResult",
    "format_validation_error",
]


MISSING_FIELDS_ERROR = "Missing required fields: text and target language"

_REQUIRED_FIELDS = {"text", "to"}


class TranslationRequest(BaseModel):
    """Body accepted by ``POST /api/translate``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    text: str = Field(..., min_length=1)
    source_language: str = Field(default=AUTO_LANGUAGE, alias="from")
    target_language: str = Field(..., min_length=1, alias="to")

    @field_validator("text", mode="before")
    @classmethod
    def _stringify_number(cls, value: Any) -> Any:
        # Numbers are forwarded as their text; booleans and containers are not.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("source_language", mode="before")
    @classmethod
    def _default_source(cls, value: Any) -> Any:
        if value is None:
            return AUTO_LANGUAGE
        if isinstance(value, str) and not value.strip():
            return AUTO_LANGUAGE
        return value


def _is_missing(issue: Any) -> bool:
    location = issue.get("loc", ())
    if not location or location[0] not in _REQUIRED_FIELDS:
        return False
    return issue.get("type") in {"missing", "string_too_short"} or (
        issue.get("type") == "string_type" and issue.get("input") is None
    )


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    issues = error.errors()
    if issues and all(_is_missing(issue) for issue in issues):
        return MISSING_FIELDS_ERROR

    messages: list[str] = []
    for issue in issues:
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid translation request: {details}"
