"""Expose the language catalog to clients."""

from __future__ import annotations

from typing import Any

from flask import Blueprint

from unitrans.backend.config.language_catalog import get_languages
from unitrans.backend.services import build_languages_response

blueprint = Blueprint("languages", __name__, url_prefix="/api")


@blueprint.get("/languages")
def list_languages() -> tuple[Any, int]:
    """Return the ``code -> name`` mapping, ``auto`` first."""

    return build_languages_response(get_languages())
