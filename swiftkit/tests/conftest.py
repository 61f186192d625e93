"""Shared test fixtures."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks a test configured so later tests never write to a closed stream."""
    yield
    logger.remove()
