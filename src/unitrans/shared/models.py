"""Wire models exchanged between the proxy and its clients."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TranslationResult(BaseModel):
    """JSON body returned by ``POST /api/translate``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    translated_text: str = Field(alias="translatedText")
    detected_language: str | None = Field(default=None, alias="detectedLanguage")
    original_text: str = Field(alias="originalText")
    source_language: str = Field(alias="sourceLanguage")
    target_language: str = Field(alias="targetLanguage")
    confidence: float | None = None
    is_demo_mode: bool | None = Field(default=None, alias="isDemoMode")

    def to_payload(self) -> dict[str, Any]:
        """Serialise using the camelCase keys of the public API."""

        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["TranslationResult"]
