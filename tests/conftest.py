"""Root conftest — shared test configuration."""

import pytest

from docstore.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings() is lru_cached; clear it so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
