"""
Shared fixtures for hellodi tests
"""

import pytest

from hellodi import Dependency
from hellodi.settings import get_settings


class FakeDependency(Dependency):
    """Captures messages instead of writing them anywhere"""

    def __init__(self):
        self.message = None
        self.messages = []

    def output(self, message: str) -> None:
        self.message = message
        self.messages.append(message)


@pytest.fixture
def fake_dependency():
    return FakeDependency()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset them around each test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
