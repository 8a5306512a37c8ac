"""Storage exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from src.core.enums import ErrorKind

    from .errors import ClassifiedError


class StorageError(Exception):
    """Raisable form of a classified storage error.

    Branch on ``error`` (or ``kind``) rather than on exception subclasses.
    """

    def __init__(self, error: ClassifiedError) -> None:
        super().__init__(error.message)
        self.error = error
        self.cause = error.cause

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def path(self) -> str | None:
        return self.error.path


def raise_classified(error: ClassifiedError) -> NoReturn:
    """Raise ``error`` as a StorageError chained to its original cause."""
    raise StorageError(error) from error.cause
