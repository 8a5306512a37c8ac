"""Object-storage error classification.

Converts botocore failures into a closed set of classified errors and applies
the size limits used when resolving upload configuration.
"""

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
from .sizing import (
    DEFAULT_MULTIPART_SIZE,
    DEFAULT_MULTIPART_THRESHOLD,
    INT_MAX,
    MULTIPART_MIN_SIZE,
    UploadSizes,
    clamp_to_int_range,
    fast_upload_buffer_size,
    get_multipart_size_property,
    multipart_size,
    resolve_upload_sizes,
)
from .translation import extract_from_async_failure, translate, translate_errors

__all__ = [
    # Translation
    "extract_from_async_failure",
    "translate",
    "translate_errors",
    "contains_interrupted",
    # Classified errors
    "AccessDeniedError",
    "ClassifiedError",
    "ClientSideError",
    "GenericError",
    "GenericServiceError",
    "InterruptedOperationError",
    "NotFoundError",
    "RangeError",
    "RedirectError",
    "ServiceError",
    # Exceptions
    "StorageError",
    "raise_classified",
    # Sizing
    "DEFAULT_MULTIPART_SIZE",
    "DEFAULT_MULTIPART_THRESHOLD",
    "INT_MAX",
    "MULTIPART_MIN_SIZE",
    "UploadSizes",
    "clamp_to_int_range",
    "fast_upload_buffer_size",
    "get_multipart_size_property",
    "multipart_size",
    "resolve_upload_sizes",
]
