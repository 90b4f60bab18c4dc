"""Parameter store protocols for neo-param-cache.

This module defines the minimal capability the cache needs from the
durable store: fetch, upsert and delete by name.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class ParameterType(str, Enum):
    """Storage type of a parameter value."""
    STRING = "String"
    SECURE_STRING = "SecureString"


@dataclass(frozen=True)
class StoredParameter:
    """A parameter as reported by the store."""
    name: str
    value: str
    last_modified: datetime
    version: Optional[int] = None


@runtime_checkable
class ParameterStore(Protocol):
    """Protocol for durable parameter store implementations."""
    
    @abstractmethod
    async def get_parameter(self, name: str, with_decryption: bool) -> Optional[StoredParameter]:
        """Fetch parameter by name, None if it does not exist."""
        ...
    
    @abstractmethod
    async def put_parameter(
        self,
        name: str,
        value: str,
        parameter_type: ParameterType,
        key_id: Optional[str] = None,
    ) -> None:
        """Create or overwrite parameter."""
        ...
    
    @abstractmethod
    async def delete_parameter(self, name: str) -> None:
        """Delete parameter by name."""
        ...
