"""Shared unit test fixtures."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo structlog configuration made by a test."""
    yield
    structlog.reset_defaults()
