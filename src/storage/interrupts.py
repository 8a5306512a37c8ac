"""Detection of interruption anywhere in an exception's cause chain."""

from __future__ import annotations

import asyncio
import concurrent.futures

# Socket timeouts count as interrupted I/O
INTERRUPT_TYPES: tuple[type[BaseException], ...] = (
    InterruptedError,
    TimeoutError,
    KeyboardInterrupt,
    asyncio.CancelledError,
    concurrent.futures.CancelledError,
)


def next_cause(exc: BaseException) -> BaseException | None:
    """Return the next link in the chain, the way tracebacks follow it."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def contains_interrupted(failure: BaseException | None) -> bool:
    """Check whether ``failure`` or any exception it was raised from is an interrupt.

    Follows ``__cause__`` and implicit ``__context__`` links iteratively, so
    chains of any length are walked; a link back to an exception already
    visited ends the walk.
    """
    seen: set[int] = set()
    current = failure
    while current is not None and id(current) not in seen:
        if isinstance(current, INTERRUPT_TYPES):
            return True
        seen.add(id(current))
        current = next_cause(current)
    return False
