"""Shared fixtures for the yieldpoint test suite."""
import logging

import matplotlib
import pytest

matplotlib.use("Agg")

from yieldpoint.model.curve import generate_curve  # noqa: E402


@pytest.fixture(scope="session")
def curve():
    """Default-material curve at the playback resolution."""
    return generate_curve(400)


@pytest.fixture
def clean_logger():
    """Drop handlers that setup_logging() attached during a test."""
    yield logging.getLogger("yieldpoint")
    logger = logging.getLogger("yieldpoint")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
