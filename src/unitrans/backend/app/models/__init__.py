"""Typed request/response models used by the translation routes."""

from .api import (
    MISSING_FIELDS_ERROR,
    TranslationRequest,
    TranslationResult,
    format_validation_error,
)

__all__ = [
    "MISSING_FIELDS_ERROR",
    "TranslationRequest",
    "TranslationResult",
    "format_validation_error",
]
