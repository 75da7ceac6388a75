"""Utilities for serialising translation responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Tuple

from flask import jsonify

from unitrans.backend.app.services import TranslationOutcome

ResponseTuple = Tuple[Any, int]


def build_translation_response(outcome: TranslationOutcome) -> ResponseTuple:
    """Return a ``200`` JSON response for either kind of outcome."""

    return jsonify(outcome.to_result().to_payload()), 200


def build_languages_response(languages: Mapping[str, str]) -> ResponseTuple:
    """Return the language catalog as a JSON object in catalog order."""

    return jsonify(dict(languages)), 200
