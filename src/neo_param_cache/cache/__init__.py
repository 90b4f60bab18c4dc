"""Cache feature for neo-param-cache.

Feature-First layout for the parameter-store-backed TTL cache:
- entities/: Options, envelope, naming and store protocol
- services/: Cache façade and factory
- adapters/: AWS SSM and in-memory store implementations
"""

# Core entities and configuration
from .entities.config import (
    ParamCacheOptions,
    ResolvedCacheOptions,
    ParamCacheSettings,
    merge_defaults,
)
from .entities.envelope import CacheEnvelope
from .entities.naming import map_key, sanitize_key
from .entities.protocols import ParameterStore, ParameterType, StoredParameter

# Cache service orchestration
from .services.cache_service import ParamCache
from .services.cache_factory import create_param_cache

# Store adapters
from .adapters.ssm_adapter import SSMParameterStore
from .adapters.memory_adapter import InMemoryParameterStore, StoreCall

__all__ = [
    # Configuration
    "ParamCacheOptions",
    "ResolvedCacheOptions",
    "ParamCacheSettings",
    "merge_defaults",
    
    # Entities
    "CacheEnvelope",
    "map_key",
    "sanitize_key",
    "ParameterStore",
    "ParameterType",
    "StoredParameter",
    
    # Services
    "ParamCache",
    "create_param_cache",
    
    # Adapters
    "SSMParameterStore",
    "InMemoryParameterStore",
    "StoreCall",
]
