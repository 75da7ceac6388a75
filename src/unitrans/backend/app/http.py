"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from flask import jsonify

BAD_REQUEST = "bad_request"
VALIDATION_ERROR = "validation_error"
CONFIGURATION_ERROR = "configuration_error"


@dataclass(frozen=True)
class ProblemResponse:
    """JSON error payload of the form ``{"error": code, "message": text}``."""

    error: str
    status: int
    message: str | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        return payload

    def to_response(self) -> tuple[Any, int]:
        """Convert the problem payload into a Flask response tuple."""

        return jsonify(self.as_dict()), self.status


def problem_response(error: str, *, status: int, message: str | None = None) -> ProblemResponse:
    return ProblemResponse(error=error, status=status, message=message)


def bad_request(message: str | None) -> ProblemResponse:
    """Problem for bodies that are not a JSON object."""

    return problem_response(
        BAD_REQUEST, status=HTTPStatus.BAD_REQUEST, message=message or "Invalid request"
    )


def validation_error(message: str) -> ProblemResponse:
    """Problem for well-formed bodies that fail field validation."""

    return problem_response(VALIDATION_ERROR, status=HTTPStatus.BAD_REQUEST, message=message)


def configuration_error(message: str) -> ProblemResponse:
    """Problem for server-side data that failed to load."""

    return problem_response(
        CONFIGURATION_ERROR, status=HTTPStatus.INTERNAL_SERVER_ERROR, message=message
    )


__all__ = [
    "BAD_REQUEST",
    "CONFIGURATION_ERROR",
    "VALIDATION_ERROR",
    "ProblemResponse",
    "bad_request",
    "configuration_error",
    "problem_response",
    "validation_error",
]
