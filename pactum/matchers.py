"""Matchers for interaction specifications.

A matcher pairs a concrete example value with a comparison rule, so a
verification engine can accept a family of equivalent values instead of
demanding byte equality. Matchers here are pure data: they are rendered
into the mock service's JSON format and never evaluated against live
traffic by pactum itself.

Example:
    >>> from pactum.matchers import regex, whitespace_insensitive
    >>>
    >>> regex("2024-01-31", r"\\d{4}-\\d{2}-\\d{2}")
    MatcherDescriptor(generate='2024-01-31', matcher='\\\\d{4}-\\\\d{2}-\\\\d{2}')
    >>>
    >>> m = whitespace_insensitive("{ Category(id:7) { id } }")
    >>> m.matches("{ Category(id:7) {\\n  id\\n} }")
    True
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Pattern

from pactum.errors import MatcherError

_WHITESPACE_RUN = re.compile(r"\s+")
WHITESPACE_CLASS = r"\s+"


class Matcher(ABC):
    """Base class for values that render into a mock-service matching rule."""

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Render the matcher as mock-service JSON."""


@dataclass(frozen=True)
class MatcherDescriptor(Matcher):
    """A regular-expression matcher with its canonical example.

    Attributes:
        generate: Example value a stub returns when no live matching happens
        matcher: Regular-expression source an equivalent value must match
    """

    generate: Any
    matcher: str

    def __post_init__(self) -> None:
        if self.generate is None:
            raise MatcherError(
                "A matcher needs an example value to generate",
                field="generate",
                value=self.generate,
            )
        if not isinstance(self.matcher, str) or not self.matcher:
            raise MatcherError(
                "A matcher needs a regular expression",
                field="matcher",
                value=self.matcher,
            )

    def matches(self, value: str) -> bool:
        """Check whether ``value`` is accepted by this matcher's pattern."""
        return re.fullmatch(self.matcher, value) is not None

    def to_json(self) -> dict[str, Any]:
        return {
            "json_class": "Pact::Term",
            "data": {
                "generate": self.generate,
                "matcher": {"json_class": "Regexp", "s": self.matcher, "o": 0},
            },
        }


@dataclass(frozen=True)
class Like(Matcher):
    """Match by type rather than value."""

    contents: Any

    def to_json(self) -> dict[str, Any]:
        return {"json_class": "Pact::SomethingLike", "contents": to_json(self.contents)}


@dataclass(frozen=True)
class EachLike(Matcher):
    """Match an array whose every element is like ``contents``."""

    contents: Any
    min: int = 1

    def __post_init__(self) -> None:
        if self.min < 1:
            raise MatcherError(
                "An array matcher needs a minimum of at least 1",
                field="min",
                value=self.min,
                expected=">= 1",
            )

    def to_json(self) -> dict[str, Any]:
        return {
            "json_class": "Pact::ArrayLike",
            "contents": to_json(self.contents),
            "min": self.min,
        }


def regex(generate: Any, matcher: str | Pattern[str]) -> MatcherDescriptor:
    """Build a regular-expression matcher.

    Args:
        generate: The literal value to echo back as the canonical example
        matcher: Pattern source (or compiled pattern) equivalent values match

    Returns:
        MatcherDescriptor holding both
    """
    if isinstance(matcher, re.Pattern):
        matcher = matcher.pattern
    return MatcherDescriptor(generate=generate, matcher=matcher)


term = regex


def like(contents: Any) -> Like:
    return Like(contents)


def each_like(contents: Any, min: int = 1) -> EachLike:
    return EachLike(contents, min=min)


def whitespace_pattern(text: str) -> str:
    """Derive a pattern accepting ``text`` with any whitespace runs.

    Every non-whitespace character is escaped so it matches literally and
    every run of whitespace becomes ``\\s+``.

    A run may change length or characters but cannot disappear, so the
    minified ``{Category(id:7){id}}`` does not match ``{ Category(id:7) { id } }``.
    """
    parts = _WHITESPACE_RUN.split(text)
    return WHITESPACE_CLASS.join(re.escape(part) for part in parts)


def whitespace_insensitive(text: str) -> MatcherDescriptor:
    """Build a matcher for ``text`` that tolerates whitespace differences."""
    return regex(text, whitespace_pattern(text))


def to_json(value: Any) -> Any:
    """Render a value tree, replacing every matcher by its JSON form."""
    if isinstance(value, Matcher):
        return value.to_json()
    if isinstance(value, Mapping):
        return {key: to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(item) for item in value]
    return value
