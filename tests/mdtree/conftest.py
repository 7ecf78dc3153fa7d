import pytest
from loguru import logger

from mdtree.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; tests that patch the environment need a clean read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks the CLI attached to captured streams."""
    yield
    logger.remove()
