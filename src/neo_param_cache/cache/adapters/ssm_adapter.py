"""AWS SSM Parameter Store adapter for neo-param-cache."""

import logging
from contextlib import AsyncExitStack
from typing import Any, Dict, Optional

from aiobotocore.session import AioSession
from botocore.exceptions import BotoCoreError, ClientError

from ..entities.config import ParamCacheSettings
from ..entities.protocols import ParameterStore, ParameterType, StoredParameter
from ...core.exceptions import CacheConstructionError, ParameterStoreError

logger = logging.getLogger(__name__)

PARAMETER_NOT_FOUND = "ParameterNotFound"


def _error_code(error: ClientError) -> Optional[str]:
    """Extract the AWS error code from a botocore client error."""
    return error.response.get("Error", {}).get("Code")


class SSMParameterStore(ParameterStore):
    """SSM parameter store adapter backed by an aiobotocore client.

    The client is created by :meth:`connect` and released by
    :meth:`disconnect`; the adapter is also an async context manager.
    A pre-built client can be injected for testing.
    """

    def __init__(
        self,
        settings: Optional[ParamCacheSettings] = None,
        client: Any = None,
        session: Optional[AioSession] = None,
    ):
        self.settings = settings or ParamCacheSettings()
        self._client = client
        self._session = session
        self._exit_stack: Optional[AsyncExitStack] = None

    @property
    def connected(self) -> bool:
        """Check if an SSM client is available."""
        return self._client is not None

    async def connect(self) -> None:
        """Create the SSM client."""
        if self._client is not None:
            return

        session = self._session or AioSession(profile=self.settings.profile_name)
        exit_stack = AsyncExitStack()

        try:
            self._client = await exit_stack.enter_async_context(
                session.create_client(
                    "ssm",
                    region_name=self.settings.region_name,
                    endpoint_url=self.settings.endpoint_url,
                    config=self.settings.to_client_config(),
                )
            )
        except BotoCoreError as e:
            await exit_stack.aclose()
            raise CacheConstructionError(
                f"Failed to create SSM client: {e}",
                error_code="SSM_CLIENT_CREATION_FAILED",
                details={
                    "region_name": self.settings.region_name,
                    "profile_name": self.settings.profile_name,
                },
            ) from e

        self._exit_stack = exit_stack
        logger.info(f"Connected to SSM parameter store (region={self.settings.region_name or 'default'})")

    async def disconnect(self) -> None:
        """Close the SSM client if this adapter created it."""
        if self._exit_stack is None:
            return

        try:
            await self._exit_stack.aclose()
        except Exception as e:
            logger.error(f"Error closing SSM client: {e}")
        finally:
            self._exit_stack = None
            self._client = None

    async def __aenter__(self) -> "SSMParameterStore":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()

    def _ensure_connected(self) -> Any:
        if self._client is None:
            raise ParameterStoreError(
                "SSM client not connected",
                error_code="SSM_NOT_CONNECTED",
            )
        return self._client

    async def get_parameter(self, name: str, with_decryption: bool) -> Optional[StoredParameter]:
        """Fetch parameter by name, None when SSM reports ParameterNotFound."""
        client = self._ensure_connected()

        try:
            response = await client.get_parameter(Name=name, WithDecryption=with_decryption)
        except ClientError as e:
            if _error_code(e) == PARAMETER_NOT_FOUND:
                return None
            raise self._store_error("get", name, e) from e
        except BotoCoreError as e:
            raise self._store_error("get", name, e) from e

        parameter = response["Parameter"]
        return StoredParameter(
            name=parameter.get("Name", name),
            value=parameter.get("Value", ""),
            last_modified=parameter["LastModifiedDate"],
            version=parameter.get("Version"),
        )

    async def put_parameter(
        self,
        name: str,
        value: str,
        parameter_type: ParameterType,
        key_id: Optional[str] = None,
    ) -> None:
        """Create or overwrite parameter."""
        client = self._ensure_connected()

        request: Dict[str, Any] = {
            "Name": name,
            "Value": value,
            "Type": parameter_type.value,
            "Overwrite": True,
        }
        if key_id is not None:
            request["KeyId"] = key_id

        try:
            await client.put_parameter(**request)
        except (ClientError, BotoCoreError) as e:
            raise self._store_error("put", name, e) from e

    async def delete_parameter(self, name: str) -> None:
        """Delete parameter by name; a missing parameter is not an error."""
        client = self._ensure_connected()

        try:
            await client.delete_parameter(Name=name)
        except ClientError as e:
            if _error_code(e) == PARAMETER_NOT_FOUND:
                return
            raise self._store_error("delete", name, e) from e
        except BotoCoreError as e:
            raise self._store_error("delete", name, e) from e

    def _store_error(self, operation: str, name: str, error: Exception) -> ParameterStoreError:
        """Wrap a botocore error with operation context."""
        store_error_code = _error_code(error) if isinstance(error, ClientError) else None
        return ParameterStoreError(
            f"SSM {operation} failed for {name}: {error}",
            operation=operation,
            parameter_name=name,
            store_error_code=store_error_code,
            error_code="PARAMETER_STORE_ERROR",
        )
