"""
Tests for custom exception hierarchy.

WHY: Exception testing ensures:
1. Exceptions serialize correctly without leaking sensitive data
2. Subclasses carry the right default messages
3. Context data is properly filtered
"""

import pytest

from student_db.core.exceptions import (
    AppException,
    InvalidQueryArgumentError,
    InvalidStudentRecordError,
    PreconditionViolation,
)


class TestAppException:
    """Test base AppException class."""

    def test_default_message(self):
        """Verify default message is used when none provided."""
        exc = AppException()
        assert exc.message == "An unexpected error occurred"
        assert str(exc) == "An unexpected error occurred"

    def test_custom_message(self):
        """Verify custom message overrides default."""
        exc = AppException(message="Custom error message")
        assert exc.message == "Custom error message"

    def test_context_data(self):
        """Verify context data is stored."""
        exc = AppException(index=3, received_type="str")
        assert exc.context == {"index": 3, "received_type": "str"}

    def test_to_dict_basic(self):
        """Verify exception serializes to dict correctly."""
        exc = AppException(message="Test error", index=3)
        result = exc.to_dict()

        assert result["error"] == "AppException"
        assert result["message"] == "Test error"
        assert result["details"] == {"index": 3}

    def test_to_dict_filters_sensitive_data(self):
        """Verify sensitive fields are filtered from dict."""
        exc = AppException(
            message="Test error",
            password="secret123",
            token="abc123",
            regular_field="visible",
        )
        result = exc.to_dict()

        assert "password" not in result["details"]
        assert "token" not in result["details"]
        assert result["details"]["regular_field"] == "visible"

    def test_to_dict_no_context(self):
        """Verify to_dict works with no context data."""
        assert AppException(message="Test error").to_dict()["details"] is None


class TestPreconditionExceptions:
    """Test precondition-related exceptions."""

    @pytest.mark.parametrize(
        "exc_class", [InvalidStudentRecordError, InvalidQueryArgumentError]
    )
    def test_inherit_from_precondition_violation(self, exc_class):
        """Verify both subclasses can be caught as PreconditionViolation."""
        assert issubclass(exc_class, PreconditionViolation)
        assert issubclass(exc_class, AppException)

    def test_invalid_record_default_message(self):
        """Verify InvalidStudentRecordError has appropriate message."""
        exc = InvalidStudentRecordError(index=0, received_type="int")
        assert "non-student" in exc.message
        assert exc.to_dict()["details"] == {"index": 0, "received_type": "int"}

    def test_invalid_argument_default_message(self):
        """Verify InvalidQueryArgumentError has appropriate message."""
        exc = InvalidQueryArgumentError()
        assert "string" in exc.message.lower()
