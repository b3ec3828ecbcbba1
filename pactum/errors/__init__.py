"""Error types raised by pactum."""

from pactum.errors.base import (
    ErrorCode,
    InvalidMethodError,
    InvalidOperationError,
    InvalidQueryError,
    InvalidStatusError,
    MatcherError,
    MissingDescriptionError,
    MissingQueryError,
    MissingStatusError,
    MockServiceConnectionError,
    MockServiceError,
    PactumError,
    ValidationError,
)

__all__ = [
    "ErrorCode",
    "PactumError",
    "ValidationError",
    "InvalidOperationError",
    "MissingQueryError",
    "InvalidQueryError",
    "MissingDescriptionError",
    "InvalidMethodError",
    "MissingStatusError",
    "InvalidStatusError",
    "MatcherError",
    "MockServiceError",
    "MockServiceConnectionError",
]
