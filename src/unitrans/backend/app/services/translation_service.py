"""Forward translation requests upstream and absorb upstream failures.

The service never lets an upstream problem reach the caller. A reply that
cannot be used is replaced by a :class:`DemoTranslation`, a clearly labelled
placeholder that still echoes the request, so the route always answers with a
successful response once the request itself has validated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from flask import current_app

from unitrans.backend.app.models import TranslationRequest, TranslationResult

from .upstream import UpstreamError, UpstreamTranslator, build_langpair

_LOGGER = logging.getLogger(__name__)

EXTENSION_KEY = "unitrans.translation_service"
DEMO_CONFIDENCE = 0.75


@dataclass(frozen=True)
class UpstreamTranslation:
    """Translation produced by the upstream API."""

    request: TranslationRequest
    translated_text: str
    detected_language: str | None
    confidence: float

    def to_result(self) -> TranslationResult:
        return TranslationResult(
            translated_text=self.translated_text,
            detected_language=self.detected_language,
            original_text=self.request.text,
            source_language=self.request.source_language,
            target_language=self.request.target_language,
            confidence=self.confidence,
        )


@dataclass(frozen=True)
class DemoTranslation:
    """Placeholder returned when the upstream call could not be completed."""

    request: TranslationRequest
    reason: str

    @property
    def translated_text(self) -> str:
        return (
            f'[DEMO MODE] Translation of "{self.request.text}" '
            f"from {self.request.source_language} to {self.request.target_language}"
        )

    def to_result(self) -> TranslationResult:
        return TranslationResult(
            translated_text=self.translated_text,
            detected_language=self.request.source_language,
            original_text=self.request.text,
            source_language=self.request.source_language,
            target_language=self.request.target_language,
            confidence=DEMO_CONFIDENCE,
            is_demo_mode=True,
        )


TranslationOutcome = Union[UpstreamTranslation, DemoTranslation]


class TranslationService:
    """Translate requests through an upstream client with demo fallback."""

    def __init__(self, upstream: UpstreamTranslator, *, autodetect: bool = False) -> None:
        self._upstream = upstream
        self._autodetect = autodetect

    def translate(self, request: TranslationRequest) -> TranslationOutcome:
        langpair = build_langpair(
            request.source_language,
            request.target_language,
            autodetect=self._autodetect,
        )

        try:
            response = self._upstream.translate(request.text, langpair)
        except UpstreamError as error:
            _LOGGER.warning(
                "Upstream translation failed for %s; serving demo result",
                langpair,
                exc_info=True,
            )
            return DemoTranslation(request=request, reason=str(error))

        return UpstreamTranslation(
            request=request,
            translated_text=response.translated_text,
            detected_language=response.detected_language,
            confidence=response.quality,
        )


def get_translation_service() -> TranslationService:
    """Return the service registered on the active Flask application."""

    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "DEMO_CONFIDENCE",
    "EXTENSION_KEY",
    "DemoTranslation",
    "TranslationOutcome",
    "TranslationService",
    "UpstreamTranslation",
    "get_translation_service",
]
