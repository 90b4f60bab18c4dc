"""Cache entities - configuration, envelope, naming and store protocols."""

from .config import ParamCacheOptions, ResolvedCacheOptions, ParamCacheSettings, merge_defaults
from .envelope import CacheEnvelope
from .naming import map_key, sanitize_key
from .protocols import ParameterStore, ParameterType, StoredParameter

__all__ = [
    "ParamCacheOptions",
    "ResolvedCacheOptions",
    "ParamCacheSettings",
    "merge_defaults",
    "CacheEnvelope",
    "map_key",
    "sanitize_key",
    "ParameterStore",
    "ParameterType",
    "StoredParameter",
]
