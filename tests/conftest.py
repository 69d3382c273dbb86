"""
Shared pytest fixtures for Pokescroll tests.
"""

import pytest
from loguru import logger

from pokescroll.exceptions import FetchError
from pokescroll.services.browse_state import BrowseState
from tests.helpers import FakeSource


@pytest.fixture
def state():
    return BrowseState()


@pytest.fixture
def source(state):
    fake = FakeSource()
    fake.state = state
    return fake


@pytest.fixture
def network_error():
    return FetchError("Could not reach catalog: connection refused")


@pytest.fixture(autouse=True)
def silence_loguru():
    """Drop any sinks a test installed through ``setup_logging``."""
    yield
    logger.remove()
