"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from src.core.config import Settings, reset_settings

ClientErrorFactory = Callable[..., ClientError]


@pytest.fixture
def make_client_error() -> ClientErrorFactory:
    """Build botocore service failures the way botocore parses S3 responses."""

    def _make(
        status: int | None,
        code: str | None = None,
        message: str = "",
        operation_name: str = "GetObject",
        **details: Any,
    ) -> ClientError:
        response: dict[str, Any] = {"Error": {}}
        if code is not None:
            response["Error"] = {"Code": code, "Message": message, **details}
        if status is not None:
            response["ResponseMetadata"] = {"HTTPStatusCode": status}
        return ClientError(response, operation_name)

    return _make


@pytest.fixture
def connection_error() -> EndpointConnectionError:
    """Transport failure raised before the service answered."""
    return EndpointConnectionError(endpoint_url="https://s3.us-east-1.amazonaws.com")


@pytest.fixture
def settings() -> Iterator[Settings]:
    """Provide test settings independent of the environment."""
    reset_settings()
    yield Settings(_env_file=None)
    reset_settings()
