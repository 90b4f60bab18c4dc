"""Cache envelope - the record persisted in the parameter store.

ONLY envelope serialization - every value the cache writes is wrapped in
``{"TTL": <seconds>, "Value": "<payload>"}`` so expiry can be enforced on
read by a store that has no native TTL.
"""

import math
from datetime import timedelta
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...core.exceptions import CacheDeserializationError, CacheSerializationError

TTLInput = Union[timedelta, int, float]


def ttl_to_seconds(ttl: TTLInput) -> int:
    """Floor a TTL to whole seconds, clamping negatives to zero.
    
    The wire TTL is unsigned, so a negative TTL is stored as ``0``, which
    reads back as already expired.
    """
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    else:
        seconds = float(ttl)
    return max(0, math.floor(seconds))


class CacheEnvelope(BaseModel):
    """Serialized unit stored under one parameter name."""
    
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )
    
    ttl_seconds: int = Field(alias="TTL", ge=0, strict=True)
    value: str = Field(alias="Value", strict=True)
    
    @classmethod
    def from_ttl(cls, value: str, ttl: TTLInput) -> "CacheEnvelope":
        """Create envelope from a value and a timedelta or number of seconds."""
        try:
            return cls(ttl_seconds=ttl_to_seconds(ttl), value=value)
        except ValidationError as e:
            raise CacheSerializationError(
                f"Cannot build cache envelope: {e.errors()[0]['msg']}",
                error_code="CACHE_SERIALIZATION_ERROR",
            ) from e
    
    def encode(self) -> str:
        """Serialize to the compact wire form, e.g. ``{"TTL":60,"Value":"x"}``."""
        try:
            return self.model_dump_json(by_alias=True)
        except (ValueError, TypeError) as e:
            raise CacheSerializationError(
                f"Failed to serialize cache envelope: {e}",
                error_code="CACHE_SERIALIZATION_ERROR",
            ) from e
    
    @classmethod
    def decode(cls, payload: str) -> "CacheEnvelope":
        """Parse a stored payload.
        
        Raises:
            CacheDeserializationError: If payload is not a valid envelope
        """
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            raise CacheDeserializationError(
                f"Invalid cache envelope: {e.error_count()} validation error(s)",
                payload=payload,
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e
