"""
Shared fixtures.
"""

import pytest
import structlog

from src.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings and logging config around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
