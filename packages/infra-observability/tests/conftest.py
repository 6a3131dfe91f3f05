"""Shared fixtures for infra-observability tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import structlog

from sigil.infra.observability.logging import IDS_LOGGER_NAME, SIGIL_LOGGER_NAME

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo configure_logging so other test modules see default logging."""
    yield
    structlog.reset_defaults()
    sigil_logger = logging.getLogger(SIGIL_LOGGER_NAME)
    sigil_logger.handlers.clear()
    sigil_logger.setLevel(logging.NOTSET)
    sigil_logger.propagate = True
    logging.getLogger(IDS_LOGGER_NAME).setLevel(logging.NOTSET)
