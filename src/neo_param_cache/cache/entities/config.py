"""Cache configuration for neo-param-cache."""

from dataclasses import dataclass
from typing import Optional

from botocore.config import Config as BotocoreConfig
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .protocols import ParameterType

DEFAULT_SECRET = True
DEFAULT_BASE_PATH = "/cache"
DEFAULT_KEY_ID: Optional[str] = None


@dataclass(frozen=True)
class ParamCacheOptions:
    """Caller-supplied cache options.

    ``None`` means "unset" for every field; unset fields are filled by
    :func:`merge_defaults`.
    """

    # SecureString when True, String when False
    secret: Optional[bool] = None

    # Where parameters live, without trailing slash. Keep the IAM policy in sync.
    base_path: Optional[str] = None

    # KMS key id or ARN used to encrypt SecureString values
    key_id: Optional[str] = None


@dataclass(frozen=True)
class ResolvedCacheOptions:
    """Cache options with every default applied."""

    secret: bool
    base_path: str
    key_id: Optional[str] = None

    @property
    def parameter_type(self) -> ParameterType:
        """Parameter type requested from the store for every write."""
        if self.secret:
            return ParameterType.SECURE_STRING
        return ParameterType.STRING


def merge_defaults(options: Optional[ParamCacheOptions] = None) -> ResolvedCacheOptions:
    """Fill unset options with defaults.

    Defaults: secret=True, base_path="/cache", key_id=None.
    """
    options = options or ParamCacheOptions()
    return ResolvedCacheOptions(
        secret=DEFAULT_SECRET if options.secret is None else options.secret,
        base_path=DEFAULT_BASE_PATH if options.base_path is None else options.base_path,
        key_id=DEFAULT_KEY_ID if options.key_id is None else options.key_id,
    )


def override_options(base: ParamCacheOptions, overrides: Optional[ParamCacheOptions]) -> ParamCacheOptions:
    """Layer explicitly set fields of ``overrides`` on top of ``base``."""
    if overrides is None:
        return base
    return ParamCacheOptions(
        secret=base.secret if overrides.secret is None else overrides.secret,
        base_path=base.base_path if overrides.base_path is None else overrides.base_path,
        key_id=base.key_id if overrides.key_id is None else overrides.key_id,
    )


class ParamCacheSettings(BaseSettings):
    """Environment-backed settings for the SSM cache."""

    model_config = SettingsConfigDict(
        env_prefix="PARAM_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cache options (unset unless provided)
    secret: Optional[bool] = Field(default=None, description="Store values as SecureString")
    base_path: Optional[str] = Field(default=None, description="Parameter path prefix")
    key_id: Optional[str] = Field(default=None, description="KMS key id for SecureString values")

    # SSM client location
    region_name: Optional[str] = Field(default=None, description="AWS region")
    endpoint_url: Optional[str] = Field(default=None, description="Custom SSM endpoint")
    profile_name: Optional[str] = Field(default=None, description="AWS shared credentials profile")

    # SSM client behaviour
    connect_timeout: float = Field(default=5.0, gt=0, description="Socket connect timeout in seconds")
    read_timeout: float = Field(default=10.0, gt=0, description="Socket read timeout in seconds")
    max_attempts: int = Field(default=3, ge=1, description="Total attempts per SSM request")
    retry_mode: str = Field(default="standard", description="botocore retry mode")

    def to_options(self) -> ParamCacheOptions:
        """Get cache options from settings."""
        return ParamCacheOptions(
            secret=self.secret,
            base_path=self.base_path,
            key_id=self.key_id,
        )

    def to_client_config(self) -> BotocoreConfig:
        """Get botocore client configuration."""
        return BotocoreConfig(
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={"max_attempts": self.max_attempts, "mode": self.retry_mode},
        )
