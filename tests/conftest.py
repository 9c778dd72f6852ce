import logging

import pytest

from error_handling.config import get_settings
from error_handling.models.model_user import UserDetails


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """setup_logging() replaces handlers on the package logger; undo it."""
    package_logger = logging.getLogger("error_handling")
    handlers, level = package_logger.handlers[:], package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


@pytest.fixture
def john():
    return UserDetails(name="John Watson", email="john.w@gmail.com", age=20)


@pytest.fixture
def mary():
    return UserDetails(name="Mary Morstan", email="mary.m@gmail.com", age=35)
