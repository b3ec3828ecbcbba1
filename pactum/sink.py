"""The consumer side of a finalized interaction.

A sink registers interaction specifications with whatever serves and
verifies them (usually a mock service) and later confirms that every
registered interaction was exercised. pactum does not interpret what a
sink does; it only finalizes builders and propagates the sink's outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, Union, runtime_checkable

from pactum.graphql import GraphQLInteraction
from pactum.interaction import Interaction, InteractionSpecification

logger = logging.getLogger(__name__)

Registrable = Union[Interaction, GraphQLInteraction, InteractionSpecification, Mapping[str, Any]]


@runtime_checkable
class InteractionSink(Protocol):
    """Anything that accepts finalized interactions and verifies them."""

    async def add_interaction(self, spec: InteractionSpecification) -> Any: ...

    async def verify(self) -> Any: ...


def finalize(interaction: Registrable) -> InteractionSpecification:
    """Turn any accepted interaction form into a specification.

    Builders are finalized with ``json()``, object-form mappings go through
    :meth:`InteractionSpecification.from_object`.
    """
    if isinstance(interaction, InteractionSpecification):
        return interaction
    if isinstance(interaction, (Interaction, GraphQLInteraction)):
        return interaction.json()
    if isinstance(interaction, Mapping):
        return InteractionSpecification.from_object(interaction)
    raise TypeError(f"Cannot register interaction of type {type(interaction).__name__}")


async def register(sink: InteractionSink, interaction: Registrable) -> InteractionSpecification:
    """Finalize ``interaction`` and hand it to ``sink``.

    Returns:
        The specification that was registered.

    Raises:
        ValidationError: If the interaction cannot be finalized.
        Whatever the sink raises, unchanged.
    """
    spec = finalize(interaction)
    logger.debug(f"Registering interaction {spec.description!r}")
    await sink.add_interaction(spec)
    return spec
