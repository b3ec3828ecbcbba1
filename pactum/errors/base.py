"""Exception hierarchy for pactum.

Every pactum error inherits from PactumError and carries:
- error_code: an ErrorCode enum for programmatic handling
- context: a dict with the offending field/value details
- suggestions: actionable steps to resolve the issue

Builder errors are raised synchronously at the call that violated a
constraint (or at finalization) and are never caught inside the package.

Example:
    try:
        interaction.json()
    except ValidationError as e:
        print(f"Error [{e.error_code.value}]: {e.message}")
        for suggestion in e.suggestions:
            print(f"  - {suggestion}")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for pactum.

    Error codes are organized by category:
    - E2xx: Validation errors (builder usage)
    - E3xx: Matcher errors
    - E5xx: Mock service errors
    - E9xx: Unknown/internal errors
    """

    # Validation errors (E2xx)
    VALIDATION_FAILED = "E201"
    INVALID_OPERATION = "E202"
    MISSING_QUERY = "E203"
    INVALID_QUERY = "E204"
    MISSING_DESCRIPTION = "E205"
    INVALID_METHOD = "E206"
    MISSING_STATUS = "E207"
    INVALID_STATUS = "E208"

    # Matcher errors (E3xx)
    INVALID_MATCHER = "E301"

    # Mock service errors (E5xx)
    MOCK_SERVICE_FAILED = "E501"
    MOCK_SERVICE_UNREACHABLE = "E502"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if 200 <= code_num < 300:
            return "validation"
        elif 300 <= code_num < 400:
            return "matcher"
        elif 500 <= code_num < 600:
            return "mock_service"
        else:
            return "unknown"


class PactumError(Exception):
    """Base exception for all pactum errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: Extra details about the failure
        suggestions: List of actionable steps to resolve the issue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.cause = cause
        self.context: dict[str, Any] = dict(extra_context)
        self._suggestions = suggestions

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [f"Error [{self.error_code.value}]: {self.message}"]

        for key, value in self.context.items():
            lines.append(f"  {key}: {value!r}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
        }


class ValidationError(PactumError):
    """An interaction builder was used with invalid or missing input.

    Check the 'field' and 'value' attributes for the constraint that
    was violated. These errors are usage errors in the calling test code.
    """

    error_code = ErrorCode.VALIDATION_FAILED
    default_message = "Validation failed"
    default_suggestions = [
        "Check the field name and value mentioned in the error",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(message=message, **kwargs)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            base = f"{base} (field: {self.field})"
        return base

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        result["value"] = repr(self.value)
        if self.expected:
            result["expected"] = self.expected
        return result


class InvalidOperationError(ValidationError):
    """The GraphQL operation kind is not one of the supported values."""

    error_code = ErrorCode.INVALID_OPERATION
    default_message = "Invalid GraphQL operation"
    default_suggestions = [
        "Pass 'query' or 'mutation' to with_operation()",
        "Leave with_operation() out entirely to send a null operationName",
    ]


class MissingQueryError(ValidationError):
    """No GraphQL query was provided."""

    error_code = ErrorCode.MISSING_QUERY
    default_message = "You must provide a GraphQL query."
    default_suggestions = [
        "Call with_query() with a non-empty GraphQL document before json()",
    ]


class InvalidQueryError(ValidationError):
    """The GraphQL query does not parse."""

    error_code = ErrorCode.INVALID_QUERY
    default_message = "GraphQL query is invalid"
    default_suggestions = [
        "Check the query for unbalanced braces or parentheses",
        "Paste the query into a GraphQL IDE to see the syntax error in context",
    ]


class MissingDescriptionError(ValidationError):
    """The interaction has no human-readable description."""

    error_code = ErrorCode.MISSING_DESCRIPTION
    default_message = "You must provide a description for the query."
    default_suggestions = [
        "Call upon_receiving('a request for ...') before json()",
    ]


class InvalidMethodError(ValidationError):
    """The request method is not a known HTTP method."""

    error_code = ErrorCode.INVALID_METHOD
    default_message = "Invalid HTTP method"


class MissingStatusError(ValidationError):
    """The response shape has no status code."""

    error_code = ErrorCode.MISSING_STATUS
    default_message = "You must provide a status code for the response."
    default_suggestions = [
        "Pass status=... to will_respond_with()",
    ]


class InvalidStatusError(ValidationError):
    """The response status is not a valid HTTP status code."""

    error_code = ErrorCode.INVALID_STATUS
    default_message = "Invalid HTTP status code"
    default_suggestions = [
        "Use an integer between 100 and 599",
    ]


class MatcherError(ValidationError):
    """A matcher was constructed with incomplete or invalid arguments."""

    error_code = ErrorCode.INVALID_MATCHER
    default_message = "Invalid matcher"


class MockServiceError(PactumError):
    """The mock service answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the mock service
        body: Response body text (usually the mismatch report)
    """

    error_code = ErrorCode.MOCK_SERVICE_FAILED
    default_message = "Mock service request failed"
    default_suggestions = [
        "Read the mock service log for the mismatch details",
        "Check that every registered interaction was exercised by the test",
    ]

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message=message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status_code"] = self.status_code
        result["body"] = self.body
        return result


class MockServiceConnectionError(MockServiceError):
    """The mock service could not be reached."""

    error_code = ErrorCode.MOCK_SERVICE_UNREACHABLE
    default_message = "Could not reach the mock service"
    default_suggestions = [
        "Verify the mock service is running",
        "Check PACTUM_MOCK_SERVICE_HOST and PACTUM_MOCK_SERVICE_PORT",
    ]
