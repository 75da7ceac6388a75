"""Services backing the translation proxy routes."""

from .translation_service import (
    DemoTranslation,
    TranslationOutcome,
    TranslationService,
    UpstreamTranslation,
    get_translation_service,
)
from .upstream import MyMemoryClient, UpstreamError, UpstreamResponse, build_langpair

__all__ = [
    "DemoTranslation",
    "MyMemoryClient",
    "TranslationOutcome",
    "TranslationService",
    "UpstreamError",
    "UpstreamResponse",
    "UpstreamTranslation",
    "build_langpair",
    "get_translation_service",
]
