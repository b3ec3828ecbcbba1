"""GraphQL interactions.

A GraphQL interaction is an HTTP interaction whose request is always a
JSON ``POST`` carrying ``operationName``, ``query`` and ``variables``. The
query is matched ignoring whitespace differences, so a consumer may send
the same document formatted any way it likes.

Example:
    >>> from pactum.graphql import GraphQLInteraction
    >>>
    >>> spec = (
    ...     GraphQLInteraction()
    ...     .upon_receiving("a request for projects")
    ...     .given("i have a list of projects")
    ...     .with_query("{ Category(id:7) { id name } }")
    ...     .with_variables({})
    ...     .will_respond_with(status=200, body={"data": {"Category": {"id": 7}}})
    ...     .json()
    ... )
    >>> spec.request["method"]
    'POST'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from graphql import parse as gql_parse
from graphql.error import GraphQLSyntaxError

from pactum.errors import (
    InvalidOperationError,
    InvalidQueryError,
    MissingDescriptionError,
    MissingQueryError,
)
from pactum.interaction import Interaction, InteractionSpecification, merge_request
from pactum.matchers import whitespace_insensitive
from pactum.types import HTTPMethod, JSONValue

logger = logging.getLogger(__name__)

GraphQLVariables = dict[str, JSONValue]


class GraphQLOperation(Enum):
    """Kind of GraphQL operation an interaction names."""

    QUERY = "query"
    MUTATION = "mutation"
    UNSPECIFIED = None

    @classmethod
    def valid(cls) -> list[GraphQLOperation]:
        """Operations that may be passed to ``with_operation``."""
        return [cls.QUERY, cls.MUTATION]


class GraphQLInteraction:
    """Builder for a GraphQL interaction.

    Wraps an :class:`Interaction` for the parts shared with plain HTTP
    interactions. Request fields given through ``with_request`` take
    precedence over the ones derived from the query at ``json()`` time.
    """

    def __init__(self) -> None:
        self._interaction = Interaction()
        self.operation = GraphQLOperation.UNSPECIFIED
        self.variables: GraphQLVariables = {}
        self.query: str | None = None

    @property
    def description(self) -> str | None:
        return self._interaction.description

    @property
    def provider_state(self) -> str | None:
        return self._interaction.provider_state

    def given(self, provider_state: str) -> GraphQLInteraction:
        self._interaction.given(provider_state)
        return self

    def upon_receiving(self, description: str) -> GraphQLInteraction:
        self._interaction.upon_receiving(description)
        return self

    def with_request(self, shape: Mapping[str, Any] | None = None, /, **kwargs: Any) -> GraphQLInteraction:
        self._interaction.with_request(shape, **kwargs)
        return self

    def will_respond_with(self, shape: Mapping[str, Any] | None = None, /, **kwargs: Any) -> GraphQLInteraction:
        self._interaction.will_respond_with(shape, **kwargs)
        return self

    def with_operation(self, operation: GraphQLOperation | str | None) -> GraphQLInteraction:
        """Set the type of GraphQL operation. Generally not required.

        Args:
            operation: One of "query" or "mutation"

        Raises:
            InvalidOperationError: For anything else, including None.
        """
        valid = GraphQLOperation.valid()
        resolved = next(
            (op for op in valid if operation is op or operation == op.value),
            None,
        )
        if resolved is None:
            names = ", ".join(op.value for op in valid)
            raise InvalidOperationError(
                f"You must provide a valid GraphQL operation: {names}.",
                field="operation",
                value=operation,
                expected=names,
            )

        self.operation = resolved
        return self

    def with_variables(self, variables: GraphQLVariables | None) -> GraphQLInteraction:
        """Set the variables used in the query, replacing any set before."""
        self.variables = dict(variables or {})
        return self

    def with_query(self, query: str | None) -> GraphQLInteraction:
        """Set the GraphQL query document.

        Whitespace is not significant: the generated matcher accepts the
        query with any run of whitespace in place of another. A run cannot be
        dropped altogether, so a minified form of the query does not match.

        Raises:
            MissingQueryError: If the query is empty.
            InvalidQueryError: If the query is not a string or not valid GraphQL.
        """
        if query is not None and not isinstance(query, str):
            raise InvalidQueryError(
                f"GraphQL query must be a string, got {type(query).__name__}",
                field="query",
                value=query,
                expected="str",
            )
        if query is None or not query.strip():
            raise MissingQueryError(field="query", value=query)

        try:
            gql_parse(query)
        except GraphQLSyntaxError as e:
            raise InvalidQueryError(
                f"GraphQL Query is invalid: {e.message}",
                field="query",
                value=query,
                cause=e,
            ) from e

        self.query = query
        return self

    def json(self) -> InteractionSpecification:
        """Return the interaction specification.

        Raises:
            MissingQueryError: If no query was set.
            MissingDescriptionError: If no description was set.
        """
        if self.query is None:
            raise MissingQueryError(field="query")
        if not self.description:
            raise MissingDescriptionError(field="description")

        derived = {
            "method": HTTPMethod.POST.value,
            "headers": {"content-type": "application/json"},
            "body": {
                "operationName": self.operation.value,
                "query": whitespace_insensitive(self.query),
                "variables": self.variables,
            },
        }
        spec = InteractionSpecification(
            description=self.description,
            provider_state=self.provider_state,
            request=merge_request(self._interaction.request, derived),
            response=self._interaction.response,
        )
        logger.debug(f"Finalized GraphQL interaction: {self.description!r}")
        return spec
