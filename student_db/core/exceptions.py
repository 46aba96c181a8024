"""
Custom exception hierarchy for structured error handling.

WHY: Custom exceptions provide:
1. A single base class callers can catch for anything raised by the package
2. Structured error payloads with contextual data
3. No sensitive data leaks when errors are serialized

IMPORTANT: Queries over well-formed input never raise. Everything below
signals a broken caller precondition.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception class for all student_db exceptions.

    WHY: Centralizing error structure in a base class keeps messages and
    serialized payloads consistent across the package.

    All custom exceptions should inherit from this class.
    """

    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, **context: Any):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            **context: Additional context for debugging (filtered in to_dict)
        """
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary.

        WHY: Embedding applications can log or return a structured error
        without knowing the concrete exception class.

        Returns:
            Dictionary with error details (sensitive fields filtered out)
        """
        sensitive_fields = {"password", "token", "secret", "key", "api_key"}
        filtered_context = {
            k: v for k, v in self.context.items() if k.lower() not in sensitive_fields
        }

        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": filtered_context if filtered_context else None,
        }


# ============================================================================
# Precondition Exceptions
# ============================================================================


class PreconditionViolation(AppException):
    """
    Raised when a query is called with input outside its contract.

    WHY: The query layer does not validate record contents, but handing it
    something that is not a student collection is a programming error that
    should fail fast instead of producing a half-computed result.
    """

    default_message = "Query precondition violated"


class InvalidStudentRecordError(PreconditionViolation):
    """
    Raised when an element of the input collection is not a Student.

    Context:
        index: Position of the offending element in the input
        received_type: Type name of the offending element
    """

    default_message = "Collection contains a non-student record"


class InvalidQueryArgumentError(PreconditionViolation):
    """
    Raised when a filter argument (name, group) is not a string.

    Context:
        argument: Name of the offending parameter
        received_type: Type name of the value passed
    """

    default_message = "Query argument must be a string"
