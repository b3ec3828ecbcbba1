"""pactum - Declarative HTTP and GraphQL contract interactions.

pactum lets a test describe one expected HTTP interaction: the provider
state it needs, the request that triggers it and the response the provider
must return. Builders accumulate those parts through chained calls and
produce an immutable specification for a mock service to serve and verify.

Example:
    >>> from pactum import GraphQLInteraction, MockService, register
    >>>
    >>> interaction = (
    ...     GraphQLInteraction()
    ...     .upon_receiving("a request for projects")
    ...     .given("i have a list of projects")
    ...     .with_query("{ Category(id:7) { id name } }")
    ...     .will_respond_with(status=200, body={"data": {"Category": {"id": 7}}})
    ... )
    >>>
    >>> async def test_projects():
    ...     async with MockService() as service:
    ...         await register(service, interaction)
    ...         ...  # exercise the consumer against the mock service
    ...         await service.verify()

Core Models:
    Interaction: Builder for a plain HTTP interaction
    GraphQLInteraction: Builder for a GraphQL-over-HTTP interaction
    InteractionSpecification: The finalized, read-only interaction
    MatcherDescriptor: Example value plus regular-expression matching rule
"""

from pactum.config import PactumSettings, load_settings
from pactum.errors import (
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
from pactum.graphql import GraphQLInteraction, GraphQLOperation, GraphQLVariables
from pactum.interaction import Interaction, InteractionSpecification, merge_request
from pactum.matchers import (
    EachLike,
    Like,
    MatcherDescriptor,
    each_like,
    like,
    regex,
    term,
    whitespace_insensitive,
    whitespace_pattern,
)
from pactum.mock_service import MockService
from pactum.observability import configure_logging, get_logger
from pactum.sink import InteractionSink, finalize, register
from pactum.types import HTTPMethod, JSONValue

__version__ = "0.1.0"

__all__ = [
    # Builders
    "Interaction",
    "InteractionSpecification",
    "GraphQLInteraction",
    "GraphQLOperation",
    "GraphQLVariables",
    "merge_request",
    # Matchers
    "MatcherDescriptor",
    "Like",
    "EachLike",
    "regex",
    "term",
    "like",
    "each_like",
    "whitespace_insensitive",
    "whitespace_pattern",
    # Sinks
    "InteractionSink",
    "MockService",
    "finalize",
    "register",
    # Types
    "HTTPMethod",
    "JSONValue",
    # Config
    "PactumSettings",
    "load_settings",
    "configure_logging",
    "get_logger",
    # Errors
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
