"""neo-param-cache - TTL cache backed by AWS Systems Manager Parameter Store.

Values are stored as ``{"TTL": <seconds>, "Value": "<string>"}`` parameters
under a configurable base path. Expiry is measured from the parameter's
last-modified time and enforced when the value is read.

Example:
    async with await create_param_cache(ParamCacheOptions(base_path="/myapp/cache")) as cache:
        await cache.set("session/123", token, timedelta(minutes=30))
        token = await cache.get("session/123")
"""

from .__version__ import __version__

from .cache import (
    ParamCache,
    create_param_cache,
    ParamCacheOptions,
    ResolvedCacheOptions,
    ParamCacheSettings,
    merge_defaults,
    CacheEnvelope,
    map_key,
    sanitize_key,
    ParameterStore,
    ParameterType,
    StoredParameter,
    SSMParameterStore,
    InMemoryParameterStore,
    StoreCall,
)

from .core.exceptions import (
    ParamCacheError,
    ConfigurationError,
    CacheConstructionError,
    CacheError,
    CacheKeyError,
    CacheKeyNotFoundError,
    CacheSerializationError,
    CacheDeserializationError,
    ParameterStoreError,
    ParameterStoreTimeoutError,
)

from .config.logging_config import configure_logging, get_logger

__all__ = [
    "__version__",
    
    # Cache
    "ParamCache",
    "create_param_cache",
    "ParamCacheOptions",
    "ResolvedCacheOptions",
    "ParamCacheSettings",
    "merge_defaults",
    "CacheEnvelope",
    "map_key",
    "sanitize_key",
    
    # Store
    "ParameterStore",
    "ParameterType",
    "StoredParameter",
    "SSMParameterStore",
    "InMemoryParameterStore",
    "StoreCall",
    
    # Exceptions
    "ParamCacheError",
    "ConfigurationError",
    "CacheConstructionError",
    "CacheError",
    "CacheKeyError",
    "CacheKeyNotFoundError",
    "CacheSerializationError",
    "CacheDeserializationError",
    "ParameterStoreError",
    "ParameterStoreTimeoutError",
    
    # Logging
    "configure_logging",
    "get_logger",
]
