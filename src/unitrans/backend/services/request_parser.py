"""Helpers for normalising incoming translation requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from unitrans.backend.app.models import TranslationRequest, format_validation_error


def parse_translation_payload(req: Request) -> dict[str, Any]:
    """Extract a JSON object from ``req``."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    return dict(data)


def parse_translation_request(req: Request) -> TranslationRequest:
    """Return a validated :class:`TranslationRequest` for ``req``.

    Field problems are raised as ``ValueError`` so the application's
    validation handler renders them as ``400 validation_error``.
    """

    payload = parse_translation_payload(req)
    try:
        return TranslationRequest.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc
