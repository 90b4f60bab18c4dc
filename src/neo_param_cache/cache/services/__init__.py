"""Cache services - the TTL façade and its factory."""

from .cache_service import ParamCache
from .cache_factory import create_param_cache, load_settings

__all__ = [
    "ParamCache",
    "create_param_cache",
    "load_settings",
]
