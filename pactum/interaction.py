"""Interaction builder for HTTP contracts.

An interaction describes one expected request/response pair plus the
provider state it depends on. Builders accumulate the parts through
chained calls and ``json()`` returns an immutable InteractionSpecification
ready to be handed to a sink.

Example:
    >>> from pactum import Interaction
    >>>
    >>> spec = (
    ...     Interaction()
    ...     .given("i have a list of projects")
    ...     .upon_receiving("a request for projects")
    ...     .with_request(method="GET", path="/projects", headers={"Accept": "application/json"})
    ...     .will_respond_with(status=200, body=[{"id": 1}])
    ...     .json()
    ... )
    >>> spec.request["method"]
    'GET'
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pactum.errors import InvalidStatusError, MissingStatusError
from pactum.matchers import to_json
from pactum.types import HTTPMethod

logger = logging.getLogger(__name__)

REQUEST_FIELDS = ("method", "path", "query", "headers", "body")
RESPONSE_FIELDS = ("status", "headers", "body")


def merge_request(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Merge two request shapes, keeping ``base`` on conflict.

    Keys only present in ``overlay`` are filled in. Keys present in both keep
    the ``base`` value, except that two mappings are merged recursively with
    the same rule. Header names compare case-insensitively.

    Args:
        base: Fields set explicitly by the caller
        overlay: Defaults derived by a specialized builder

    Returns:
        A new merged mapping; neither argument is modified.
    """
    merged = _thaw(base)
    for key, value in overlay.items():
        if key not in merged:
            merged[key] = _thaw(value)
        elif isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = _merge(merged[key], value, case_insensitive=key == "headers")
    return merged


def _merge(base: Mapping[str, Any], overlay: Mapping[str, Any], case_insensitive: bool) -> dict[str, Any]:
    merged = _thaw(base)
    present = {_fold(key, case_insensitive): key for key in merged}

    for key, value in overlay.items():
        existing = present.get(_fold(key, case_insensitive))
        if existing is None:
            merged[key] = _thaw(value)
            present[_fold(key, case_insensitive)] = key
        elif isinstance(merged[existing], Mapping) and isinstance(value, Mapping):
            merged[existing] = _merge(merged[existing], value, case_insensitive=False)
    return merged


def _fold(key: str, case_insensitive: bool) -> str:
    return key.lower() if case_insensitive else key


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Copy a value tree into plain dicts and lists; matchers are shared."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(item) for item in value]
    return value


def _shape(fields: tuple[str, ...], shape: Mapping[str, Any] | None, kwargs: dict[str, Any]) -> dict[str, Any]:
    """Collect the explicitly supplied fields of a request/response shape."""
    values = dict(shape or {})
    values.update(kwargs)
    unknown = set(values) - set(fields)
    if unknown:
        raise TypeError(f"Unexpected fields: {', '.join(sorted(unknown))}")
    return {key: _thaw(value) for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class InteractionSpecification:
    """A finalized interaction, read-only.

    Attributes:
        description: Human-readable label for the request
        provider_state: Precondition the provider must arrange, if any
        request: Request shape (method, path, query, headers, body)
        response: Response shape (status, headers, body)
    """

    description: str | None
    provider_state: str | None
    request: Mapping[str, Any]
    response: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "request", _freeze(self.request))
        object.__setattr__(self, "response", _freeze(self.response))

    def __hash__(self) -> int:
        # Equal specifications render to the same wire form.
        return hash(json.dumps(self.to_dict(), sort_keys=True, default=repr))

    def to_dict(self) -> dict[str, Any]:
        """Render the mock-service wire form, matchers included."""
        result: dict[str, Any] = {}
        if self.description is not None:
            result["description"] = self.description
        if self.provider_state is not None:
            result["providerState"] = self.provider_state
        result["request"] = to_json(self.request)
        result["response"] = to_json(self.response)
        return result

    @classmethod
    def from_object(cls, interaction: Mapping[str, Any]) -> InteractionSpecification:
        """Build a specification from the object form.

        The object form uses the keys ``state``, ``uponReceiving``,
        ``withRequest`` and ``willRespondWith``.
        """
        builder = Interaction()
        if interaction.get("state") is not None:
            builder.given(interaction["state"])
        if interaction.get("uponReceiving") is not None:
            builder.upon_receiving(interaction["uponReceiving"])
        if interaction.get("withRequest") is not None:
            builder.with_request(interaction["withRequest"])
        if interaction.get("willRespondWith") is not None:
            builder.will_respond_with(interaction["willRespondWith"])
        return builder.json()


class Interaction:
    """Builder for a single HTTP interaction.

    Every setter returns the builder for chaining and overwrites what the
    same setter stored before.
    """

    def __init__(self) -> None:
        self.description: str | None = None
        self.provider_state: str | None = None
        self.request: dict[str, Any] = {}
        self.response: dict[str, Any] = {}

    def given(self, provider_state: str) -> Interaction:
        """Set the provider state the interaction depends on."""
        self.provider_state = provider_state
        return self

    def upon_receiving(self, description: str) -> Interaction:
        """Set the human-readable description of the request."""
        self.description = description
        return self

    def with_request(self, shape: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Interaction:
        """Set the request shape.

        Accepts a mapping and/or keyword arguments with the keys ``method``,
        ``path``, ``query``, ``headers`` and ``body``. Fields left out stay
        unset so a specialized builder can fill them in later.

        Raises:
            InvalidMethodError: If ``method`` is not a known HTTP method.
        """
        request = _shape(REQUEST_FIELDS, shape, kwargs)
        if "method" in request:
            request["method"] = HTTPMethod.parse(request["method"]).value
        self.request = request
        return self

    def will_respond_with(self, shape: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Interaction:
        """Set the response shape (``status``, ``headers``, ``body``).

        Raises:
            MissingStatusError: If no status is given.
            InvalidStatusError: If the status is not an HTTP status code.
        """
        response = _shape(RESPONSE_FIELDS, shape, kwargs)
        status = response.get("status")
        if status is None:
            raise MissingStatusError(field="status")
        if isinstance(status, bool) or not isinstance(status, int) or not 100 <= status <= 599:
            raise InvalidStatusError(
                f"Invalid HTTP status code: {status!r}",
                field="status",
                value=status,
                expected="integer between 100 and 599",
            )
        self.response = response
        return self

    def json(self) -> InteractionSpecification:
        """Return the interaction specification built so far."""
        spec = InteractionSpecification(
            description=self.description,
            provider_state=self.provider_state,
            request=_thaw(self.request),
            response=_thaw(self.response),
        )
        logger.debug(f"Finalized interaction: {self.description!r}")
        return spec
