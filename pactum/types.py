"""Shared value types for interaction specifications."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pactum.errors import InvalidMethodError

# A structurally comparable value: what bodies, variables and query
# parameters are made of.
JSONValue = Union[None, bool, int, float, str, dict[str, "JSONValue"], list["JSONValue"]]


class HTTPMethod(str, Enum):
    """HTTP methods accepted in a request shape."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @classmethod
    def parse(cls, value: Any) -> HTTPMethod:
        """Resolve a method name in any case.

        Raises:
            InvalidMethodError: If the value is not a known HTTP method.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        valid = ", ".join(m.value for m in cls)
        raise InvalidMethodError(
            f"You must provide a valid HTTP method: {valid}.",
            field="method",
            value=value,
            expected=valid,
        )
