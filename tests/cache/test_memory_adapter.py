"""Tests for the in-memory parameter store."""

import pytest

from neo_param_cache.cache.entities.protocols import ParameterStore, ParameterType
from neo_param_cache.core.exceptions import ParameterStoreError


class TestInMemoryParameterStore:
    """Test the dict-backed store used by the cache tests."""

    def test_satisfies_protocol(self, memory_store):
        assert isinstance(memory_store, ParameterStore)

    @pytest.mark.asyncio
    async def test_put_then_get(self, memory_store, clock):
        """Test writes are stamped by the clock and versioned."""
        await memory_store.put_parameter("/c/k", "v1", ParameterType.SECURE_STRING, "alias/k")
        clock.advance(5)
        await memory_store.put_parameter("/c/k", "v2", ParameterType.SECURE_STRING)

        parameter = await memory_store.get_parameter("/c/k", True)

        assert parameter.value == "v2"
        assert parameter.version == 2
        assert parameter.last_modified == clock()
        assert memory_store.raw("/c/k").parameter_type == ParameterType.SECURE_STRING

    @pytest.mark.asyncio
    async def test_missing_parameter(self, memory_store):
        assert await memory_store.get_parameter("/c/missing", False) is None

    @pytest.mark.asyncio
    async def test_delete(self, memory_store):
        memory_store.seed("/c/k", "v")

        await memory_store.delete_parameter("/c/k")
        await memory_store.delete_parameter("/c/k")

        assert not memory_store.contains("/c/k")

    @pytest.mark.asyncio
    async def test_records_calls(self, memory_store):
        """Test seeding is not recorded but store operations are."""
        memory_store.seed("/c/k", "v")

        await memory_store.get_parameter("/c/k", True)
        await memory_store.delete_parameter("/c/k")

        assert memory_store.operations() == ["get", "delete"]
        assert memory_store.calls[0].name == "/c/k"

    @pytest.mark.asyncio
    async def test_failure_injection(self, memory_store):
        """Test injected failures are raised after the call is recorded."""
        memory_store.fail_on("put", ParameterStoreError("throttled", operation="put"))

        with pytest.raises(ParameterStoreError):
            await memory_store.put_parameter("/c/k", "v", ParameterType.STRING)

        assert memory_store.operations() == ["put"]
        assert not memory_store.contains("/c/k")

        memory_store.clear_failures()
        await memory_store.put_parameter("/c/k", "v", ParameterType.STRING)
        assert memory_store.contains("/c/k")
