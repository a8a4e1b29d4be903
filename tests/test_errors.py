"""Tests for the error envelope."""

from level.core.errors import (
    AuthenticationFailed,
    NotAMember,
    NotFound,
    PermissionDenied,
    ValidationFailed,
)


class TestErrorResponses:

    def test_not_found(self):
        exc = NotFound("Group not found")
        assert exc.http_status == 404
        assert exc.to_response() == {
            "error": {"code": "NOT_FOUND", "message": "Group not found", "status": 404}
        }

    def test_not_a_member_default_message(self):
        assert str(NotAMember()) == "The user is a not a group member"

    def test_validation_failed_carries_step_and_errors(self):
        exc = ValidationFailed("group", {"name": ["can't be blank"]})
        body = exc.to_response()["error"]
        assert body["code"] == "VALIDATION_FAILED"
        assert body["status"] == 422
        assert body["step"] == "group"
        assert body["errors"] == {"name": ["can't be blank"]}

    def test_auth_statuses(self):
        assert AuthenticationFailed().http_status == 401
        assert PermissionDenied().http_status == 403
