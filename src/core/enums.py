from enum import Enum


class ErrorKind(str, Enum):
    """Kind of a classified object-storage failure."""

    CLIENT = "client"  # No service contact made
    INTERRUPTED = "interrupted"
    SERVICE = "service"  # Service failure with a structured error body
    GENERIC_SERVICE = "generic_service"  # Service failure without a recognised body
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    RANGE = "range"
    REDIRECT = "redirect"
    GENERIC = "generic"  # Non-storage failure surfaced through a future
