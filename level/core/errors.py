"""Domain errors.

Every error carries a machine code, a human message and the HTTP status the
API layer answers with. All of them are expected outcomes returned to the
caller; none is fatal to the process.
"""

from __future__ import annotations


class LevelError(Exception):
    """Base exception for all Level domain errors."""

    code = "LEVEL_ERROR"
    http_status = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "status": self.http_status,
            }
        }


class NotFound(LevelError):
    """Zero authorized rows.

    Absent, out-of-space and hidden rows are all reported the same way.
    """

    code = "NOT_FOUND"
    http_status = 404
    default_message = "Not found"


class NotAMember(LevelError):
    code = "NOT_A_MEMBER"
    http_status = 404
    default_message = "The user is a not a group member"


class ValidationFailed(LevelError):
    """Field-level validation failure for one step of an operation."""

    code = "VALIDATION_FAILED"
    http_status = 422
    default_message = "Validation failed"

    def __init__(self, step: str, errors: dict[str, list[str]]):
        super().__init__()
        self.step = step
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["step"] = self.step
        response["error"]["errors"] = self.errors
        return response


class AuthenticationFailed(LevelError):
    code = "AUTHENTICATION_FAILED"
    http_status = 401
    default_message = "Authentication required"


class PermissionDenied(LevelError):
    code = "PERMISSION_DENIED"
    http_status = 403
    default_message = "Permission denied"
