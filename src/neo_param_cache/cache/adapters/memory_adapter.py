"""In-memory parameter store adapter for neo-param-cache.

Dict-backed stand-in for SSM that records every call it receives, so
tests can assert on the exact sequence of store operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from ..entities.protocols import ParameterStore, ParameterType, StoredParameter
from ...utils.datetime import utc_now


@dataclass(frozen=True)
class StoreCall:
    """One recorded store operation."""
    operation: str
    name: str


@dataclass
class MemoryParameter:
    """Memory parameter with store metadata."""
    value: str
    parameter_type: ParameterType
    last_modified: datetime
    version: int = 1
    key_id: Optional[str] = None


class InMemoryParameterStore(ParameterStore):
    """Memory parameter store with call recording."""
    
    GET = "get"
    PUT = "put"
    DELETE = "delete"
    
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or utc_now
        self._parameters: Dict[str, MemoryParameter] = {}
        self._failures: Dict[str, Exception] = {}
        self.calls: List[StoreCall] = []
    
    def seed(self, name: str, value: str, last_modified: Optional[datetime] = None) -> None:
        """Store a raw payload without recording a call."""
        self._parameters[name] = MemoryParameter(
            value=value,
            parameter_type=ParameterType.STRING,
            last_modified=last_modified or self._clock(),
        )
    
    def fail_on(self, operation: str, error: Exception) -> None:
        """Raise ``error`` from every subsequent ``operation`` call."""
        self._failures[operation] = error
    
    def clear_failures(self) -> None:
        """Stop injecting failures."""
        self._failures.clear()
    
    def contains(self, name: str) -> bool:
        """Check if parameter exists."""
        return name in self._parameters
    
    def raw(self, name: str) -> Optional[MemoryParameter]:
        """Get stored parameter with metadata."""
        return self._parameters.get(name)
    
    def operations(self) -> List[str]:
        """Get recorded operation names in call order."""
        return [call.operation for call in self.calls]
    
    def _record(self, operation: str, name: str) -> None:
        self.calls.append(StoreCall(operation=operation, name=name))
        error = self._failures.get(operation)
        if error is not None:
            raise error
    
    async def get_parameter(self, name: str, with_decryption: bool) -> Optional[StoredParameter]:
        """Fetch parameter by name."""
        self._record(self.GET, name)
        
        parameter = self._parameters.get(name)
        if parameter is None:
            return None
        
        return StoredParameter(
            name=name,
            value=parameter.value,
            last_modified=parameter.last_modified,
            version=parameter.version,
        )
    
    async def put_parameter(
        self,
        name: str,
        value: str,
        parameter_type: ParameterType,
        key_id: Optional[str] = None,
    ) -> None:
        """Create or overwrite parameter."""
        self._record(self.PUT, name)
        
        existing = self._parameters.get(name)
        self._parameters[name] = MemoryParameter(
            value=value,
            parameter_type=parameter_type,
            last_modified=self._clock(),
            version=existing.version + 1 if existing else 1,
            key_id=key_id,
        )
    
    async def delete_parameter(self, name: str) -> None:
        """Delete parameter by name."""
        self._record(self.DELETE, name)
        self._parameters.pop(name, None)
