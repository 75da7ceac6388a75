"""Client for the MyMemory translation API.

MyMemory is queried with ``q`` (text), ``langpair`` (``source|target``) and an
optional ``de`` contact address that raises the anonymous quota. Every failure
mode, whether transport, HTTP status or payload shape, is reported as
:class:`UpstreamError` so callers have a single exception to absorb.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from unitrans.backend.config.settings import MYMEMORY_URL

_LOGGER = logging.getLogger(__name__)

AUTODETECT_SOURCE = "Autodetect"


class UpstreamError(Exception):
    """Raised when the upstream translation API cannot produce a result."""


@dataclass(frozen=True)
class UpstreamResponse:
    """The subset of a MyMemory reply the proxy relies on."""

    translated_text: str
    detected_language: str | None = None
    quality: float = 0.0


class UpstreamTranslator(Protocol):
    def translate(self, text: str, langpair: str) -> UpstreamResponse: ...


class _MatchInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    quality: float | None = None
    detected_source_language: str | None = Field(
        default=None, alias="detectedSourceLanguage"
    )


class _ResponseData(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    translated_text: str = Field(alias="translatedText")
    match: float | _MatchInfo | None = None


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response_data: _ResponseData = Field(alias="responseData")
    response_status: int | str | None = Field(default=None, alias="responseStatus")
    response_details: str | None = Field(default=None, alias="responseDetails")


def build_langpair(source: str, target: str, *, autodetect: bool = False) -> str:
    """Return the ``langpair`` parameter for a request.

    MyMemory rejects ``auto`` as a source code. Unless ``autodetect`` is set,
    an ``auto`` source is sent as a same-language pair (``target|target``).
    """

    if source == "auto":
        return f"{AUTODETECT_SOURCE}|{target}" if autodetect else f"{target}|{target}"
    return f"{source}|{target}"


def parse_upstream_payload(payload: Any) -> UpstreamResponse:
    """Validate a decoded MyMemory body and extract the translation."""

    try:
        envelope = _Envelope.model_validate(payload)
    except ValidationError as error:
        raise UpstreamError(f"Malformed upstream payload: {error}") from error

    status = envelope.response_status
    if status is not None and str(status).strip() != "200":
        details = envelope.response_details or envelope.response_data.translated_text
        raise UpstreamError(f"Upstream reported status {status}: {details}")

    match = envelope.response_data.match
    if isinstance(match, _MatchInfo):
        quality = match.quality or 0.0
        detected = match.detected_source_language
    else:
        quality = match or 0.0
        detected = None

    return UpstreamResponse(
        translated_text=envelope.response_data.translated_text,
        detected_language=detected,
        quality=float(quality),
    )


class MyMemoryClient:
    """Synchronous MyMemory client built on :mod:`requests`."""

    def __init__(
        self,
        url: str = MYMEMORY_URL,
        *,
        contact_email: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._contact_email = contact_email
        self._timeout = timeout
        self._session = session or requests.Session()

    def translate(self, text: str, langpair: str) -> UpstreamResponse:
        params = {"q": text, "langpair": langpair}
        if self._contact_email:
            params["de"] = self._contact_email

        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as error:
            raise UpstreamError(f"Upstream request failed: {error}") from error
        except ValueError as error:
            raise UpstreamError(f"Upstream returned a non-JSON body: {error}") from error

        result = parse_upstream_payload(payload)
        _LOGGER.debug("Upstream translated %d characters for %s", len(text), langpair)
        return result


__all__ = [
    "AUTODETECT_SOURCE",
    "MyMemoryClient",
    "UpstreamError",
    "UpstreamResponse",
    "UpstreamTranslator",
    "build_langpair",
    "parse_upstream_payload",
]
