"""Cache factory for the SSM-backed parameter cache."""

import logging
from typing import Optional

from pydantic import ValidationError

from ..adapters.ssm_adapter import SSMParameterStore
from ..entities.config import ParamCacheOptions, ParamCacheSettings, override_options
from .cache_service import ParamCache
from ...core.exceptions import CacheConstructionError

logger = logging.getLogger(__name__)


def load_settings() -> ParamCacheSettings:
    """Load cache settings from the environment.
    
    Raises:
        CacheConstructionError: If environment values are invalid
    """
    try:
        return ParamCacheSettings()
    except ValidationError as e:
        raise CacheConstructionError(
            f"Invalid parameter cache settings: {e.error_count()} validation error(s)",
            error_code="CACHE_SETTINGS_INVALID",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


async def create_param_cache(
    options: Optional[ParamCacheOptions] = None,
    settings: Optional[ParamCacheSettings] = None,
) -> ParamCache:
    """Create a parameter cache backed by AWS SSM.
    
    Unset fields of ``options`` fall back to ``settings`` (loaded from the
    environment when not given), then to the built-in defaults
    (secret=True, base_path="/cache", key_id=None).
    
    Args:
        options: Explicit cache options
        settings: SSM client and cache settings
        
    Returns:
        Connected ParamCache; close it with ``aclose()`` or ``async with``
        
    Raises:
        CacheConstructionError: If settings or the SSM client cannot be loaded
    """
    settings = settings or load_settings()
    effective_options = override_options(settings.to_options(), options)
    
    store = SSMParameterStore(settings=settings)
    await store.connect()
    
    cache = ParamCache(store, effective_options)
    logger.debug(
        f"Parameter cache created: base_path={cache.options.base_path}, "
        f"type={cache.options.parameter_type.value}"
    )
    return cache
