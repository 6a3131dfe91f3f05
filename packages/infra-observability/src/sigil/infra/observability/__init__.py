"""Sigil Infra Observability -- structlog logging for identifier-aware services."""

from __future__ import annotations

from sigil.infra.observability.logging import (
    IdentifierProcessor,
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)

__all__ = [
    "IdentifierProcessor",
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
]
