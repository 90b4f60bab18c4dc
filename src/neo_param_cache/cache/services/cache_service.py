"""Cache service - TTL cache on top of a durable parameter store."""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Optional, TypeVar

from ..entities.config import ParamCacheOptions, ResolvedCacheOptions, merge_defaults
from ..entities.envelope import CacheEnvelope, TTLInput
from ..entities.naming import map_key
from ..entities.protocols import ParameterStore
from ...utils.datetime import to_utc, utc_now
from ...core.exceptions import CacheKeyError, CacheKeyNotFoundError, ParameterStoreTimeoutError

logger = logging.getLogger(__name__)
T = TypeVar('T')


class ParamCache:
    """TTL cache whose only storage is a parameter store.

    Every value is written as a :class:`CacheEnvelope` carrying its TTL.
    Expiry is measured from the store's last-modified timestamp and
    enforced lazily by :meth:`get`, which deletes stale parameters it
    comes across. The cache holds no mutable state and can be shared
    between tasks.
    """

    def __init__(self,
                 store: ParameterStore,
                 options: Optional[ParamCacheOptions] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self.options: ResolvedCacheOptions = merge_defaults(options)
        self._clock = clock or utc_now

    async def __aenter__(self) -> "ParamCache":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release store resources if the store holds any."""
        disconnect = getattr(self.store, "disconnect", None)
        if disconnect is not None:
            await disconnect()

    def parameter_name(self, key: str) -> str:
        """Get the parameter name used for a cache key."""
        return map_key(self.options.base_path, key)

    async def set(self,
                  key: str,
                  value: str,
                  ttl: TTLInput,
                  timeout: Optional[float] = None) -> None:
        """Store value under key for ttl (timedelta or seconds).

        Args:
            key: Cache key, excluding the base path
            value: Value to store
            ttl: Time to live measured from the store's last-modified time
            timeout: Optional deadline in seconds for the store call

        Raises:
            CacheKeyError: If key is empty
            CacheSerializationError: If the envelope cannot be serialized
            ParameterStoreError: If the store rejects the write
        """
        self._validate_key(key)
        name = self.parameter_name(key)
        payload = CacheEnvelope.from_ttl(value, ttl).encode()

        await self._call_store(
            "put",
            name,
            lambda: self.store.put_parameter(
                name, payload, self.options.parameter_type, self.options.key_id
            ),
            timeout,
        )

    async def get(self, key: str, timeout: Optional[float] = None) -> Optional[str]:
        """Get value for key, None if the entry has expired.

        Args:
            key: Cache key, excluding the base path
            timeout: Optional deadline in seconds for each store call

        Returns:
            Stored value, or None when the TTL has elapsed

        Raises:
            CacheKeyError: If key is empty
            CacheKeyNotFoundError: If nothing is stored for key
            CacheDeserializationError: If the stored payload is not an envelope
            ParameterStoreError: If the store call fails
        """
        self._validate_key(key)
        name = self.parameter_name(key)

        parameter = await self._call_store(
            "get",
            name,
            lambda: self.store.get_parameter(name, self.options.secret),
            timeout,
        )
        if parameter is None or not parameter.value:
            raise CacheKeyNotFoundError(key, name)

        envelope = CacheEnvelope.decode(parameter.value)

        # A zero TTL is expired on arrival, whatever the clock skew
        expires_at = to_utc(parameter.last_modified) + timedelta(seconds=envelope.ttl_seconds)
        if envelope.ttl_seconds == 0 or to_utc(self._clock()) > expires_at:
            logger.debug(f"Cache entry {name} expired at {expires_at.isoformat()}, deleting")
            await self._delete_expired(name, timeout)
            return None

        return envelope.value

    async def _delete_expired(self, name: str, timeout: Optional[float]) -> None:
        """Best-effort removal of an expired parameter."""
        try:
            await self._call_store(
                "delete", name, lambda: self.store.delete_parameter(name), timeout
            )
        except Exception as e:
            logger.warning(f"Failed to delete expired cache entry {name}: {e}")

    async def _call_store(self,
                          operation: str,
                          name: str,
                          call: Callable[[], Awaitable[T]],
                          timeout: Optional[float]) -> T:
        """Run one store call under the caller's deadline."""
        if timeout is None:
            return await call()

        try:
            return await asyncio.wait_for(call(), timeout)
        except asyncio.TimeoutError as e:
            raise ParameterStoreTimeoutError(operation, name, timeout) from e

    @staticmethod
    def _validate_key(key: str) -> None:
        if not key:
            raise CacheKeyError("Cache key cannot be empty", error_code="CACHE_KEY_EMPTY")
