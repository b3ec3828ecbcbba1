"""Client for a running Pact mock service.

The mock service stubs the provider for consumer tests: interactions are
registered over its admin API, the consumer code under test talks to it,
and verification asks it whether every interaction was exercised.

Example:
    >>> from pactum import GraphQLInteraction, MockService
    >>>
    >>> async def test_projects():
    ...     async with MockService("http://localhost:1234") as service:
    ...         await service.add_interaction(interaction.json())
    ...         ...  # exercise the consumer
    ...         await service.verify()
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pactum.config import PactumSettings
from pactum.errors import MockServiceConnectionError, MockServiceError
from pactum.interaction import InteractionSpecification
from pactum.observability.logging import log_context

logger = logging.getLogger(__name__)

MOCK_SERVICE_HEADERS = {
    "X-Pact-Mock-Service": "true",
    "Content-Type": "application/json",
}


class MockService:
    """Async client for the mock service admin API.

    Satisfies :class:`pactum.sink.InteractionSink`.

    Attributes:
        base_url: Mock service URL.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        settings: PactumSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Mock service URL (default: from settings).
            timeout: Request timeout in seconds (default: from settings).
            settings: Settings to read defaults from.
            transport: Custom httpx transport, mainly for tests.
        """
        settings = settings or PactumSettings()
        self.base_url = (base_url or settings.mock_service_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Open the underlying HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=MOCK_SERVICE_HEADERS,
            transport=self._transport,
        )
        logger.debug(f"Mock service client connected to {self.base_url}")

    async def disconnect(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> MockService:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.disconnect()

    async def add_interaction(self, spec: InteractionSpecification) -> httpx.Response:
        """Register an interaction with the mock service."""
        with log_context(interaction=spec.description):
            return await self._request("POST", "/interactions", json=spec.to_dict())

    async def remove_interactions(self) -> httpx.Response:
        """Remove every interaction registered so far."""
        return await self._request("DELETE", "/interactions")

    async def verify(self) -> httpx.Response:
        """Check that every registered interaction was exercised.

        Raises:
            MockServiceError: With the mock service's mismatch report.
        """
        return await self._request("GET", "/interactions/verification")

    async def write_pact(self, pact_details: dict[str, Any]) -> Any:
        """Ask the mock service to write the pact file.

        Args:
            pact_details: At least ``consumer`` and ``provider`` names.

        Returns:
            The decoded pact returned by the mock service.
        """
        response = await self._request("POST", "/pact", json=pact_details)
        return response.json() if response.content else None

    async def _request(self, method: str, path: str, json: Any = None) -> httpx.Response:
        if self._client is None:
            await self.connect()
        assert self._client is not None

        logger.debug(f"{method} {self.base_url}{path}")
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as e:
            logger.warning(f"Mock service unreachable at {self.base_url}: {e}")
            raise MockServiceConnectionError(
                f"Could not reach the mock service at {self.base_url}: {e}",
                cause=e,
                url=f"{self.base_url}{path}",
            ) from e

        if not response.is_success:
            logger.warning(f"{method} {path} failed with HTTP {response.status_code}")
            raise MockServiceError(
                f"{method} {path} failed with HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return response
