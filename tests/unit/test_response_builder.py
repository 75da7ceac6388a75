"""Unit tests for response formatting helpers."""

from __future__ import annotations

from flask import Flask

from unitrans.backend.app.models import TranslationRequest
from unitrans.backend.app.services import DemoTranslation, UpstreamTranslation
from unitrans.backend.services.response_builder import (
    build_languages_response,
    build_translation_response,
)

REQUEST = TranslationRequest(text="Hello", source_language="en", target_language="es")


def test_build_translation_response_for_upstream_result(app: Flask) -> None:
    outcome = UpstreamTranslation(
        request=REQUEST, translated_text="Hola", detected_language=None, confidence=0.5
    )

    with app.app_context():
        response, status = build_translation_response(outcome)

    assert status == 200
    assert response.get_json() == {
        "translatedText": "Hola",
        "originalText": "Hello",
        "sourceLanguage": "en",
        "targetLanguage": "es",
        "confidence": 0.5,
    }


def test_build_translation_response_for_demo_result(app: Flask) -> None:
    outcome = DemoTranslation(request=REQUEST, reason="offline")

    with app.app_context():
        response, status = build_translation_response(outcome)

    assert status == 200
    assert response.get_json()["isDemoMode"] is True


def test_build_languages_response_keeps_order(app: Flask) -> None:
    with app.app_context():
        response, status = build_languages_response(
            {"auto": "Auto Detect", "de": "German", "af": "Afrikaans"}
        )

    assert status == 200
    assert list(response.get_json()) == ["auto", "de", "af"]
