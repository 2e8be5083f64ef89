"""Fixtures and configuration for pytest."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default log sink after commands that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
