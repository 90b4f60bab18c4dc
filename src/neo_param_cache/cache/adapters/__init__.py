"""Parameter store adapters - AWS SSM and in-memory implementations."""

from .ssm_adapter import SSMParameterStore
from .memory_adapter import InMemoryParameterStore, StoreCall

__all__ = [
    "SSMParameterStore",
    "InMemoryParameterStore",
    "StoreCall",
]
