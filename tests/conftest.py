"""Pytest configuration and fixtures for neo-param-cache tests."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

from neo_param_cache.cache.adapters.memory_adapter import InMemoryParameterStore
from neo_param_cache.cache.entities.config import ParamCacheOptions
from neo_param_cache.cache.entities.protocols import StoredParameter
from neo_param_cache.cache.services.cache_service import ParamCache


class FrozenClock:
    """Manually advanced clock shared by the cache and the in-memory store."""
    
    def __init__(self, start: datetime):
        self.now = start
    
    def __call__(self) -> datetime:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def clock():
    """Frozen clock starting at a fixed UTC instant."""
    return FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def memory_store(clock):
    """In-memory parameter store stamped by the frozen clock."""
    return InMemoryParameterStore(clock=clock)


@pytest.fixture
def test_options():
    """Cache options used by the concrete scenarios."""
    return ParamCacheOptions(base_path="/testcache")


@pytest.fixture
def cache(memory_store, test_options, clock):
    """Parameter cache over the in-memory store."""
    return ParamCache(memory_store, test_options, clock=clock)


@pytest.fixture
def mock_store(clock):
    """Mock parameter store returning nothing by default."""
    store = AsyncMock()
    store.get_parameter = AsyncMock(return_value=None)
    store.put_parameter = AsyncMock(return_value=None)
    store.delete_parameter = AsyncMock(return_value=None)
    return store


@pytest.fixture
def make_parameter(clock):
    """Build a StoredParameter stamped with the current clock time."""
    def _make(name: str, value: str, last_modified: datetime = None) -> StoredParameter:
        return StoredParameter(name=name, value=value, last_modified=last_modified or clock())
    return _make
