"""Tests for building the SSM-backed cache."""

import pytest

from neo_param_cache.cache.entities.config import ParamCacheOptions, ParamCacheSettings
from neo_param_cache.cache.entities.protocols import ParameterType
from neo_param_cache.cache.services import cache_factory
from neo_param_cache.cache.services.cache_factory import create_param_cache, load_settings
from neo_param_cache.cache.services.cache_service import ParamCache
from neo_param_cache.core.exceptions import CacheConstructionError


class FakeSSMParameterStore:
    """Stand-in for the SSM adapter that records its lifecycle."""

    instances = []
    connect_error = None

    def __init__(self, settings=None):
        self.settings = settings
        self.connected = False
        self.disconnected = False
        FakeSSMParameterStore.instances.append(self)

    async def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    async def disconnect(self):
        self.disconnected = True


@pytest.fixture(autouse=True)
def fake_store(monkeypatch, tmp_path):
    """Replace the SSM adapter and isolate settings from the environment."""
    monkeypatch.chdir(tmp_path)
    for name in ("SECRET", "BASE_PATH", "KEY_ID", "MAX_ATTEMPTS"):
        monkeypatch.delenv(f"PARAM_CACHE_{name}", raising=False)

    FakeSSMParameterStore.instances = []
    FakeSSMParameterStore.connect_error = None
    monkeypatch.setattr(cache_factory, "SSMParameterStore", FakeSSMParameterStore)
    return FakeSSMParameterStore


class TestCreateParamCache:
    """Test factory wiring and option precedence."""

    @pytest.mark.asyncio
    async def test_defaults(self, fake_store):
        """Test a cache built without options uses the defaults."""
        cache = await create_param_cache()

        assert isinstance(cache, ParamCache)
        assert cache.options.secret is True
        assert cache.options.base_path == "/cache"
        assert cache.options.key_id is None
        assert cache.store is fake_store.instances[0]
        assert cache.store.connected

    @pytest.mark.asyncio
    async def test_settings_fill_unset_options(self):
        """Test settings values apply where options are unset."""
        settings = ParamCacheSettings(secret=False, base_path="/env/cache", key_id="alias/env")

        cache = await create_param_cache(ParamCacheOptions(base_path="/explicit"), settings)

        assert cache.options.base_path == "/explicit"
        assert cache.options.secret is False
        assert cache.options.key_id == "alias/env"
        assert cache.options.parameter_type == ParameterType.STRING
        assert cache.store.settings is settings

    @pytest.mark.asyncio
    async def test_options_from_environment(self, monkeypatch):
        """Test settings are loaded from the environment when not given."""
        monkeypatch.setenv("PARAM_CACHE_BASE_PATH", "/svc/cache")

        cache = await create_param_cache()

        assert cache.parameter_name("k") == "/svc/cache/k"

    @pytest.mark.asyncio
    async def test_connect_failure_propagates(self, fake_store):
        """Test adapter construction errors reach the caller."""
        fake_store.connect_error = CacheConstructionError("no region")

        with pytest.raises(CacheConstructionError):
            await create_param_cache()

    @pytest.mark.asyncio
    async def test_invalid_environment(self, monkeypatch):
        """Test invalid settings fail construction."""
        monkeypatch.setenv("PARAM_CACHE_MAX_ATTEMPTS", "0")

        with pytest.raises(CacheConstructionError) as exc_info:
            await create_param_cache()

        assert exc_info.value.error_code == "CACHE_SETTINGS_INVALID"

    @pytest.mark.asyncio
    async def test_close_disconnects_store(self):
        """Test closing the cache releases the adapter."""
        async with await create_param_cache() as cache:
            store = cache.store

        assert store.disconnected


class TestLoadSettings:
    """Test loading settings from the environment."""

    def test_load(self, monkeypatch):
        monkeypatch.setenv("PARAM_CACHE_KEY_ID", "alias/cache")

        assert load_settings().key_id == "alias/cache"

    def test_invalid(self, monkeypatch):
        monkeypatch.setenv("PARAM_CACHE_SECRET", "not-a-bool")

        with pytest.raises(CacheConstructionError) as exc_info:
            load_settings()

        assert exc_info.value.details["errors"]
