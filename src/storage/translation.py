"""Translation of object-store client failures into classified errors."""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, Union

from botocore.exceptions import BotoCoreError, ClientError

from src.core.config import ENDPOINT_URL

from .errors import (
    AccessDeniedError,
    ClassifiedError,
    ClientSideError,
    GenericError,
    GenericServiceError,
    InterruptedOperationError,
    NotFoundError,
    RangeError,
    RedirectError,
    ServiceError,
)
from .exceptions import StorageError, raise_classified
from .interrupts import contains_interrupted

logger = logging.getLogger(__name__)

ENDPOINT_KEY = "Endpoint"

# Keys of the error body that are not additional details
_BODY_KEYS = frozenset({"Code", "Message"})

StorageClientFailure = (ClientError, BotoCoreError)

PathLabel = Union[str, "os.PathLike[str]", None]
AsyncFailure = Union[concurrent.futures.Future, asyncio.Future, BaseException]
StatusHandler = Callable[[dict[str, Any], Union[dict[str, Any], None]], ClassifiedError]


def _as_status(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isdecimal():
        try:
            return int(value)
        except ValueError:
            return None
    return None


def status_code_of(failure: ClientError) -> int | None:
    """HTTP status of a service failure, or None when missing or malformed."""
    status = _as_status(failure.response.get("ResponseMetadata", {}).get("HTTPStatusCode"))
    if status is not None:
        return status
    return _as_status(failure.response.get("Error", {}).get("Code"))


def error_body_of(failure: ClientError) -> dict[str, Any] | None:
    """Structured error body of a service failure, or None.

    botocore fills in ``{"Code": "404", ...}`` for responses without a body
    (HEAD requests); a code that only echoes the status is not a body.
    """
    error = failure.response.get("Error")
    if not error:
        return None
    code = error.get("Code")
    if not code or str(code).isdecimal():
        return None
    return error


def additional_details(body: dict[str, Any] | None) -> dict[str, str]:
    """Body entries beyond the error code and message."""
    if not body:
        return {}
    return {key: str(value) for key, value in body.items() if key not in _BODY_KEYS}


def _service(fields: dict[str, Any], body: dict[str, Any] | None) -> ClassifiedError:
    if body is None:
        return GenericServiceError(**fields)
    return ServiceError(**fields, error_code=str(body["Code"]), details=additional_details(body))


def _redirect(fields: dict[str, Any], body: dict[str, Any] | None) -> ClassifiedError:
    if body is None:
        return GenericServiceError(**fields)
    endpoint = additional_details(body).get(ENDPOINT_KEY)
    if endpoint is not None:
        fields["message"] = (
            f"Received permanent redirect response to endpoint {endpoint}.  "
            f"This likely indicates that the object store endpoint configured in "
            f"{ENDPOINT_URL} does not match the region containing the bucket."
        )
    return RedirectError(**fields, endpoint=endpoint)


def _access_denied(fields: dict[str, Any], body: dict[str, Any] | None) -> ClassifiedError:
    return AccessDeniedError(**fields)


def _not_found(fields: dict[str, Any], body: dict[str, Any] | None) -> ClassifiedError:
    return NotFoundError(**fields)


def _range(fields: dict[str, Any], body: dict[str, Any] | None) -> ClassifiedError:
    # Object shrank underneath an open read
    return RangeError(**fields)


STATUS_HANDLERS: dict[int, StatusHandler] = {
    301: _redirect,
    401: _access_denied,
    403: _access_denied,
    404: _not_found,
    410: _not_found,
    416: _range,
}


def _path_label(path: PathLabel) -> str | None:
    if path is None:
        return None
    return str(os.fspath(path)) if isinstance(path, os.PathLike) else str(path)


def translate(operation: str, path: PathLabel, failure: BaseException) -> ClassifiedError:
    """Classify a failure raised by an object-store client call.

    Service responses are dispatched on their HTTP status; anything else is a
    client-side failure, or an interrupted one if an interrupt is found in its
    cause chain.

    Args:
        operation: Short label of the attempted action (e.g. "getObject").
        path: Object path the operation acted on, if any.
        failure: Exception raised by the client.

    Returns:
        The classified error, with ``failure`` attached as its cause.
    """
    label = _path_label(path)
    where = f" on {label}" if label is not None else ""
    fields: dict[str, Any] = {
        "message": f"{operation}{where}: {failure}",
        "operation": operation,
        "path": label,
        "cause": failure,
    }

    if not isinstance(failure, ClientError):
        if contains_interrupted(failure):
            return InterruptedOperationError(**fields)
        return ClientSideError(**fields)

    status = status_code_of(failure)
    fields["status_code"] = status
    handler = STATUS_HANDLERS.get(status, _service) if status is not None else _service
    return handler(fields, error_body_of(failure))


def _unwrap(async_failure: AsyncFailure) -> BaseException | None:
    """Underlying cause of a failed future or wrapping exception; None if cancelled."""
    if isinstance(async_failure, (concurrent.futures.Future, asyncio.Future)):
        if not async_failure.done():
            raise ValueError("Future has not completed")
        if async_failure.cancelled():
            return None
        cause = async_failure.exception()
        if cause is None:
            raise ValueError("Future completed without an exception")
        return cause
    if isinstance(async_failure, (*StorageClientFailure, StorageError)):
        return async_failure
    return async_failure.__cause__ or async_failure


def extract_from_async_failure(
    operation: str,
    path: PathLabel,
    async_failure: AsyncFailure,
) -> ClassifiedError:
    """Classify the failure behind a completed future or a wrapping exception.

    Total for every failed or cancelled future. A future that is still pending
    or finished successfully holds no failure to classify and is rejected.

    Args:
        operation: Operation which failed.
        path: Path operated on, if any.
        async_failure: Failed future, or an exception raised ``from`` the real cause.

    Returns:
        The classified error for the underlying cause.

    Raises:
        ValueError: If a future is still pending or succeeded.
    """
    label = _path_label(path)
    cause = _unwrap(async_failure)
    if cause is None:
        return InterruptedOperationError(
            message=f"{operation} failed: cancelled",
            operation=operation,
            path=label,
            cause=concurrent.futures.CancelledError(f"{operation} was cancelled"),
        )
    if isinstance(cause, StorageClientFailure):
        return translate(operation, path, cause)
    if isinstance(cause, StorageError):
        return cause.error
    if isinstance(cause, OSError):
        # I/O failures from an earlier layer keep their own message
        return GenericError(message=str(cause), operation=operation, path=label, cause=cause)
    return GenericError(
        message=f"{operation} failed: {cause}",
        operation=operation,
        path=label,
        cause=cause,
    )


@contextmanager
def translate_errors(operation: str, path: PathLabel = None) -> Iterator[None]:
    """Raise client failures in the block as classified StorageErrors.

    Example:
        with translate_errors("getObject", key):
            client.get_object(Bucket=bucket, Key=key)
    """
    try:
        yield
    except StorageClientFailure as e:
        error = translate(operation, path, e)
        logger.debug(f"{operation} failed with {error.kind.value}: {error.message}")
        raise_classified(error)
