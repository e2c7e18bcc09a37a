"""
Shared pytest fixtures.

This module provides:
- Fixtures for overriding settings through the environment
- Isolation of the library logger between tests
"""

import logging

import pytest

from mathkind.core.config import get_settings
from mathkind.core.logging import LIBRARY_LOGGER


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; make every test read the environment again."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_env(monkeypatch):
    """Set MATHKIND_* variables for one test."""
    def _apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"MATHKIND_{key}", str(value))
        get_settings.cache_clear()
        return get_settings()
    return _apply


@pytest.fixture
def library_logger():
    """The library logger, restored to its pristine state afterwards."""
    logger = logging.getLogger(LIBRARY_LOGGER)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in saved[0]:
            handler.close()
    for handler in saved[0]:
        logger.addHandler(handler)
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
