"""REST endpoint proxying translations to the upstream API."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from unitrans.backend.app.services import get_translation_service
from unitrans.backend.services import build_translation_response, parse_translation_request

blueprint = Blueprint("translations", __name__, url_prefix="/api")


@blueprint.post("/translate")
def create_translation() -> tuple[Any, int]:
    """Translate the submitted text, falling back to a demo result."""

    translation_request = parse_translation_request(request)
    outcome = get_translation_service().translate(translation_request)

    return build_translation_response(outcome)
