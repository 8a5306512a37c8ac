"""Classified object-storage errors.

Each failure kind is a frozen msgspec struct; ``ClassifiedError`` is the closed
union of all of them, so call sites can ``match`` on the variant instead of
relying on ``except`` ordering. Every variant keeps the original failure in
``cause``.
"""

from __future__ import annotations

from typing import Any, ClassVar

import msgspec

from src.core.enums import ErrorKind


class _Classified(msgspec.Struct, frozen=True, kw_only=True, tag=True):
    """Fields shared by every classified error."""

    kind: ClassVar[ErrorKind]

    message: str
    operation: str
    cause: BaseException
    path: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Plain representation for structured logging.

        The cause is rendered with ``repr`` since exceptions are not serializable.
        """
        data = msgspec.structs.asdict(self)
        data["kind"] = self.kind.value
        data["cause"] = repr(self.cause)
        return data


class ClientSideError(_Classified, frozen=True, kw_only=True):
    """Failure raised before any service response was received."""

    kind: ClassVar[ErrorKind] = ErrorKind.CLIENT


class InterruptedOperationError(_Classified, frozen=True, kw_only=True):
    """Operation was interrupted or cancelled."""

    kind: ClassVar[ErrorKind] = ErrorKind.INTERRUPTED


class ServiceError(_Classified, frozen=True, kw_only=True):
    """Service failure carrying a structured error body."""

    kind: ClassVar[ErrorKind] = ErrorKind.SERVICE

    error_code: str | None = None
    details: dict[str, str] = msgspec.field(default_factory=dict)


class GenericServiceError(_Classified, frozen=True, kw_only=True):
    """Service failure without a recognised error body."""

    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC_SERVICE


class AccessDeniedError(_Classified, frozen=True, kw_only=True):
    """Credentials were rejected or lack permission (401/403)."""

    kind: ClassVar[ErrorKind] = ErrorKind.ACCESS_DENIED


class NotFoundError(_Classified, frozen=True, kw_only=True):
    """Object or bucket does not exist (404/410)."""

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND


class RangeError(_Classified, frozen=True, kw_only=True):
    """Requested byte range is beyond the end of the object (416).

    Seen when an object is overwritten with a shorter one while being read.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.RANGE


class RedirectError(_Classified, frozen=True, kw_only=True):
    """Bucket lives behind a different endpoint (301)."""

    kind: ClassVar[ErrorKind] = ErrorKind.REDIRECT

    endpoint: str | None = None


class GenericError(_Classified, frozen=True, kw_only=True):
    """Failure from a future that is not a storage-client failure."""

    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC


ClassifiedError = (
    ClientSideError
    | InterruptedOperationError
    | ServiceError
    | GenericServiceError
    | AccessDeniedError
    | NotFoundError
    | RangeError
    | RedirectError
    | GenericError
)
