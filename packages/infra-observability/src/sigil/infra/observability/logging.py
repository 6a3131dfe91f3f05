"""Structured logging configuration using structlog.

This module provides environment-aware structured logging with:
- JSON output for production environments
- Console output with colors for development
- Identifier values rendered as plain strings in every event
- The ``sigil`` stdlib logger tree routed through the same renderer

Usage:
    # During application startup
    from sigil.infra.observability.logging import configure_logging
    configure_logging()

    # In application code
    from sigil.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.info("workspace_created", workspace_id=WorkspaceId("acme"))
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sigil.foundation.ids import Identifier, IdentifierError

if TYPE_CHECKING:
    from collections.abc import MutableMapping

# Type alias for structlog processor
Processor = structlog.types.Processor

# Logger tree of the sigil packages (stdlib logging in the foundation layer)
SIGIL_LOGGER_NAME = "sigil"
IDS_LOGGER_NAME = "sigil.foundation.ids"


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Loads configuration from environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment name (development, staging, production, test)
    - SIGIL_LOG_IDENTIFIER_EVENTS: Log identifier type and literal creation

    Attributes:
        log_level: Minimum log level to output. Default: INFO
        environment: Environment name for format selection. Default: development
        log_identifier_events: Emit DEBUG records from the identifier
            package regardless of log_level. Default: False

    Example:
        >>> settings = LoggingSettings()
        >>> settings.use_json_logs
        False  # development uses console format

        >>> settings = LoggingSettings(log_level="DEBUG", environment="production")
        >>> settings.use_json_logs
        True  # production uses JSON format
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment name for format selection",
    )
    log_identifier_events: bool = Field(
        default=False,
        alias="SIGIL_LOG_IDENTIFIER_EVENTS",
        description="Log identifier type and literal creation at DEBUG",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level.

        Raises:
            ValueError: If log level is not a valid Python logging level.
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            msg = f"log_level must be one of {valid_levels}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        """True for production environment, False otherwise."""
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """Convert log level string to logging module constant."""
        return getattr(logging, self.log_level, logging.INFO)


class IdentifierProcessor:
    """Structlog processor rendering identifier values as plain strings.

    Identifiers are not JSON serializable, and their ``repr`` would leak the
    type wrapper into console output. Identifier errors are flattened into
    their structured context.

    Example:
        >>> processor = IdentifierProcessor()
        >>> event_dict = {"event": "created", "workspace_id": WorkspaceId("acme")}
        >>> processor(None, "info", event_dict)["workspace_id"]
        'acme'
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        """Replace identifier values in event_dict.

        Args:
            logger: Logger instance (unused).
            method_name: Log method name (unused).
            event_dict: Dictionary of log context fields.

        Returns:
            Modified event_dict.
        """
        for key, value in list(event_dict.items()):
            if isinstance(value, Identifier):
                event_dict[key] = value.as_str()
            elif isinstance(value, IdentifierError):
                event_dict[key] = {"error_code": value.error_code, **value.context}
        return event_dict


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def _build_processors(settings: LoggingSettings) -> tuple[list[Processor], Processor]:
    """Return the shared processor chain and the final renderer."""
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        IdentifierProcessor(),
        structlog.processors.format_exc_info,
    ]
    renderer: Processor
    if settings.use_json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    return shared, renderer


def _configure_stdlib_bridge(
    settings: LoggingSettings, shared: list[Processor], renderer: Processor
) -> None:
    """Route the ``sigil`` stdlib logger tree through structlog rendering."""
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.add_logger_name, *shared],
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    sigil_logger = logging.getLogger(SIGIL_LOGGER_NAME)
    sigil_logger.handlers.clear()
    sigil_logger.addHandler(handler)
    sigil_logger.setLevel(settings.log_level_int)
    sigil_logger.propagate = False

    ids_logger = logging.getLogger(IDS_LOGGER_NAME)
    ids_logger.setLevel(logging.DEBUG if settings.log_identifier_events else logging.NOTSET)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for structured logging.

    Configures structlog with:
    - Context variable merging
    - Log level filtering
    - ISO 8601 timestamps (UTC)
    - Identifier rendering
    - Environment-aware rendering (JSON for production, console for development)

    The ``sigil`` stdlib logger tree gets a handler with the same chain, so
    records from the identifier package render like structlog events.

    Should be called once during application startup.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    shared, renderer = _build_processors(settings)

    structlog.configure(
        processors=[*shared, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configure_stdlib_bridge(settings, shared, renderer)


def get_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns unbound logger.

    Returns:
        Bound structlog logger with name context.
    """
    logger = structlog.get_logger()
    if name is not None:
        logger = logger.bind(logger=name)
    return logger
