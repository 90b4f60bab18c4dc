"""Tests for the exception hierarchy."""

from neo_param_cache.core.exceptions import (
    CacheConstructionError,
    CacheDeserializationError,
    CacheError,
    CacheKeyNotFoundError,
    ConfigurationError,
    ParamCacheError,
    ParameterStoreError,
    ParameterStoreTimeoutError,
)


def test_error_code_defaults_to_class_name():
    error = CacheError("boom")

    assert error.error_code == "CacheError"
    assert error.details == {}
    assert str(error) == "boom"


def test_hierarchy():
    assert issubclass(CacheConstructionError, ConfigurationError)
    assert issubclass(ConfigurationError, ParamCacheError)
    assert issubclass(ParameterStoreTimeoutError, ParameterStoreError)
    assert issubclass(ParameterStoreError, CacheError)


def test_key_not_found_names_parameter():
    error = CacheKeyNotFoundError("a b", "/cache/a_b")

    assert error.message == "No parameter found: /cache/a_b"
    assert error.details == {"key": "a b", "parameter_name": "/cache/a_b"}


def test_deserialization_error_previews_payload():
    payload = "x" * 80
    error = CacheDeserializationError("bad envelope", payload=payload)

    assert error.details["payload_size"] == 80
    assert error.details["payload_preview"] == "x" * 50
    assert error.payload == payload


def test_store_error_details():
    error = ParameterStoreError(
        "denied", operation="put", parameter_name="/cache/k", store_error_code="AccessDeniedException"
    )

    assert error.details == {
        "operation": "put",
        "parameter_name": "/cache/k",
        "store_error_code": "AccessDeniedException",
    }


def test_timeout_error():
    error = ParameterStoreTimeoutError("get", "/cache/k", 0.5)

    assert error.error_code == "PARAMETER_STORE_TIMEOUT"
    assert error.details["timeout_seconds"] == 0.5
    assert error.store_error_code is None
