"""Observability helpers for pactum."""

from pactum.observability.logging import (
    HumanReadableFormatter,
    StructuredFormatter,
    configure_from_settings,
    configure_logging,
    get_context,
    get_logger,
    log_context,
)

__all__ = [
    "HumanReadableFormatter",
    "StructuredFormatter",
    "configure_from_settings",
    "configure_logging",
    "get_context",
    "get_logger",
    "log_context",
]
