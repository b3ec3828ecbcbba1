"""Pytest fixtures for pactum tests."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from pactum.errors import MockServiceError
from pactum.graphql import GraphQLInteraction
from pactum.interaction import InteractionSpecification

PROJECTS_QUERY = "{ Category(id:7) { id name } }"


class RecordingSink:
    """In-memory sink that records what it is given."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.interactions: list[InteractionSpecification] = []
        self.verified = False
        self._fail_with = fail_with

    async def add_interaction(self, spec: InteractionSpecification) -> Any:
        if self._fail_with is not None:
            raise self._fail_with
        self.interactions.append(spec)
        return None

    async def verify(self) -> Any:
        self.verified = True
        return None


@pytest.fixture
def projects_query() -> str:
    return PROJECTS_QUERY


@pytest.fixture
def graphql_interaction() -> GraphQLInteraction:
    """A GraphQL interaction with every required field set."""
    return (
        GraphQLInteraction()
        .upon_receiving("a request for projects")
        .given("i have a list of projects")
        .with_query(PROJECTS_QUERY)
        .will_respond_with(status=200, body={"data": {"Category": {"id": 7, "name": "Books"}}})
    )


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def pactum_logger():
    """Restore the pactum logger after a test reconfigures it."""
    logger = logging.getLogger("pactum")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def failing_sink() -> RecordingSink:
    """A sink whose add_interaction is rejected like a mock service error."""
    return RecordingSink(fail_with=MockServiceError("rejected", status_code=500))
