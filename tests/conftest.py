"""Shared pytest fixtures for testing."""

import pytest

from ioc_core.core.config import get_settings
from ioc_core.di import Container, reset_container


@pytest.fixture(autouse=True)
def isolate_global_state(monkeypatch):
    """Reset the global container and settings cache around each test."""
    for var in ("IOC_USE_MOCKS", "IOC_DETECT_CYCLES", "IOC_STRICT_TYPES",
                "IOC_LOG_LEVEL", "IOC_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()


# =============================================================================
# Container Fixtures
# =============================================================================


@pytest.fixture
def container() -> Container:
    """Create an empty container."""
    return Container()


@pytest.fixture
def cycle_checked_container() -> Container:
    """Create a container that rejects circular dependencies."""
    return Container(detect_cycles=True)


@pytest.fixture
def strict_container() -> Container:
    """Create a container that checks namespace type tags."""
    return Container(strict_types=True)


# =============================================================================
# Test Data Fixtures
# =============================================================================


class FakeLogger:
    """Minimal logger collecting messages."""

    def __init__(self):
        self.messages = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class FakeDatabase:
    """Minimal database recording queries."""

    def __init__(self, logger=None):
        self.logger = logger
        self.queries = []

    def query(self, sql: str):
        self.queries.append(sql)
        if self.logger is not None:
            self.logger.log(sql)
        return []


@pytest.fixture
def logger_cls():
    return FakeLogger


@pytest.fixture
def database_cls():
    return FakeDatabase
