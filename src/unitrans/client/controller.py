"""Client-side state for a translation session.

:class:`TranslationController` owns everything a front-end needs to render:
the loading flag, the last error, the language catalog and the session
history. It talks to the proxy over HTTP with :mod:`requests`; the session
object is injectable so tests can route calls to a Flask test client.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Protocol

import requests

from unitrans.shared.models import TranslationResult

from .history import TranslationHistory

_LOGGER = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:3001"

# Used when the proxy's catalog cannot be fetched.
FALLBACK_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "auto": "Auto Detect",
        "en": "English",
        "es": "Spanish",
        "fr": "French",
        "de": "German",
        "it": "Italian",
        "pt": "Portuguese",
        "ru": "Russian",
        "ja": "Japanese",
        "ko": "Korean",
        "zh": "Chinese",
        "ar": "Arabic",
        "hi": "Hindi",
    }
)


class HttpResponse(Protocol):
    status_code: int

    @property
    def ok(self) -> bool: ...

    def json(self) -> Any: ...


class HttpSession(Protocol):
    def get(self, url: str, **kwargs: Any) -> HttpResponse: ...

    def post(self, url: str, **kwargs: Any) -> HttpResponse: ...


class TranslationController:
    """Owns translation state for a single client session."""

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        *,
        session: HttpSession | None = None,
        history: TranslationHistory | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session: HttpSession = session or requests.Session()
        self._timeout = timeout
        self.history = history or TranslationHistory()
        self._is_loading = False
        self._error: str | None = None
        self._languages: Mapping[str, str] = FALLBACK_LANGUAGES
        self._languages_error: str | None = None

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def languages(self) -> Mapping[str, str]:
        return self._languages

    @property
    def languages_error(self) -> str | None:
        return self._languages_error

    def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult | None:
        """Translate ``text`` through the proxy.

        Returns ``None`` without calling the proxy when ``text`` is blank, and
        ``None`` with :attr:`error` set when the call fails. Only successful
        calls are added to :attr:`history`.
        """

        if not text.strip():
            return None

        self._is_loading = True
        self._error = None
        try:
            response = self._session.post(
                self._url("/api/translate"),
                json={
                    "text": text.strip(),
                    "from": source_language,
                    "to": target_language,
                },
                timeout=self._timeout,
            )
            if not response.ok:
                self._error = f"HTTP error! status: {response.status_code}"
                return None
            result = TranslationResult.model_validate(response.json())
        except requests.RequestException as error:
            _LOGGER.warning("Translation request failed", exc_info=True)
            self._error = str(error) or "Translation failed"
            return None
        except ValueError as error:  # JSON decoding or pydantic validation
            _LOGGER.warning("Proxy returned an unreadable translation: %s", error)
            self._error = "Translation failed: unreadable response from server"
            return None
        finally:
            self._is_loading = False

        self.history.record(
            original_text=text,
            translated_text=result.translated_text,
            source_language=result.detected_language or source_language,
            target_language=target_language,
        )
        return result

    def clear_history(self) -> None:
        self.history.clear()

    def load_languages(self) -> Mapping[str, str]:
        """Fetch the proxy's catalog, keeping :data:`FALLBACK_LANGUAGES` on failure."""

        self._languages_error = None
        try:
            response = self._session.get(self._url("/api/languages"), timeout=self._timeout)
            if not response.ok:
                raise ValueError("Failed to fetch languages")
            payload = response.json()
            if not isinstance(payload, Mapping) or not payload:
                raise ValueError("Failed to fetch languages")
        except (requests.RequestException, ValueError) as error:
            _LOGGER.warning("Falling back to built-in languages: %s", error)
            self._languages_error = str(error) or "Failed to load languages"
            self._languages = FALLBACK_LANGUAGES
            return self._languages

        self._languages = MappingProxyType({str(code): str(name) for code, name in payload.items()})
        return self._languages

    def check_health(self) -> dict[str, Any] | None:
        """Return the proxy's health payload, or ``None`` when unreachable."""

        try:
            response = self._session.get(self._url("/api/health"), timeout=self._timeout)
            if not response.ok:
                _LOGGER.warning("Health check returned status %s", response.status_code)
                return None
            payload = response.json()
        except (requests.RequestException, ValueError) as error:
            _LOGGER.warning("Health check failed: %s", error)
            return None
        return payload if isinstance(payload, dict) else None


__all__ = [
    "DEFAULT_SERVER_URL",
    "FALLBACK_LANGUAGES",
    "HttpResponse",
    "HttpSession",
    "TranslationController",
]
