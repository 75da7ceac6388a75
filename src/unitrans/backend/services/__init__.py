"""Request parsing and response serialisation for the proxy routes."""

from .request_parser import parse_translation_payload, parse_translation_request
from .response_builder import build_languages_response, build_translation_response

__all__ = [
    "build_languages_response",
    "build_translation_response",
    "parse_translation_payload",
    "parse_translation_request",
]
