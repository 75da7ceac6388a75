"""Terminal client for the translation proxy."""

from .controller import DEFAULT_SERVER_URL, FALLBACK_LANGUAGES, TranslationController
from .history import HISTORY_DISPLAY_LIMIT, HistoryEntry, TranslationHistory
from .presentation import TranslatorPresenter, TranslatorView

__all__ = [
    "DEFAULT_SERVER_URL",
    "FALLBACK_LANGUAGES",
    "HISTORY_DISPLAY_LIMIT",
    "HistoryEntry",
    "TranslationController",
    "TranslationHistory",
    "TranslatorPresenter",
    "TranslatorView",
]
