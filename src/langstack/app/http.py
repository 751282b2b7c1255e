"""Problem payloads returned by the translation endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Mapping

from flask import Response, jsonify

PROBLEM_MIMETYPE = "application/problem+json"


@dataclass(frozen=True)
class Problem:
    """RFC 7807-flavoured error body with a machine-readable ``error`` code."""

    error: str
    status: HTTPStatus
    message: str | None = None
    details: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "status": int(self.status)}
        if self.message:
            payload["message"] = self.message
        payload.update(self.details)
        return payload

    def to_response(self) -> Response:
        response = jsonify(self.as_dict())
        response.status_code = int(self.status)
        response.mimetype = PROBLEM_MIMETYPE
        return response


def problem_response(
    error: str,
    *,
    status: HTTPStatus | int,
    message: str | None = None,
    **details: Any,
) -> Problem:
    return Problem(error=error, status=HTTPStatus(status), message=message, details=details)


__all__ = ["PROBLEM_MIMETYPE", "Problem", "problem_response"]
