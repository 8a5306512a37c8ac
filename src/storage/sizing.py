"""Size limits applied when resolving upload configuration."""

from __future__ import annotations

import logging

import msgspec

from src.core.config import Settings

logger = logging.getLogger(__name__)

MULTIPART_MIN_SIZE = 5 * 1024 * 1024  # 5MiB, smallest part the service accepts
INT_MAX = 2**31 - 1

DEFAULT_MULTIPART_SIZE = 100 * 1024 * 1024  # 100MiB
DEFAULT_MULTIPART_THRESHOLD = INT_MAX


class UploadSizes(msgspec.Struct, frozen=True, kw_only=True):
    """Upload sizes resolved from settings."""

    part_size: int
    threshold: int
    buffer_size: int


def multipart_size(
    configured: int,
    minimum: int = MULTIPART_MIN_SIZE,
    *,
    name: str = "multipart size",
) -> int:
    """Return ``configured``, raised to ``minimum`` if it is too small."""
    if configured < minimum:
        logger.warning(f"{name} must be at least {minimum} bytes; configured value is {configured}")
        return minimum
    return configured


def clamp_to_int_range(name: str, size: int) -> int:
    """Cap ``size`` to the largest signed 32-bit value.

    Output buffers are indexed with 32-bit offsets, so anything larger is
    capped with a warning rather than rejected.
    """
    if size > INT_MAX:
        logger.warning(
            f"objstore: {name} capped to ~2.14GB "
            "(maximum allowed size with current output mechanism)"
        )
        return INT_MAX
    return size


def get_multipart_size_property(settings: Settings, prop: str, default: int) -> int:
    """Read a multipart size setting, falling back to ``default`` when unset.

    Args:
        settings: Loaded settings.
        prop: Settings field name, e.g. "multipart_size".
        default: Value used when the setting is unset.

    Returns:
        The size in bytes, at least MULTIPART_MIN_SIZE.
    """
    value = getattr(settings, prop)
    part_size = default if value is None else int(value)
    return multipart_size(part_size, name=prop)


def fast_upload_buffer_size(settings: Settings) -> int:
    """Buffer size for fast uploads, capped to the 32-bit range."""
    return clamp_to_int_range("fast_upload_buffer_size", int(settings.fast_upload_buffer_size))


def resolve_upload_sizes(settings: Settings) -> UploadSizes:
    """Resolve part size, multipart threshold and upload buffer from settings.

    Parts are written through the 32-bit output buffer, so the part size is
    also capped to that range.
    """
    part_size = get_multipart_size_property(settings, "multipart_size", DEFAULT_MULTIPART_SIZE)
    threshold = get_multipart_size_property(
        settings, "multipart_threshold", DEFAULT_MULTIPART_THRESHOLD
    )
    return UploadSizes(
        part_size=clamp_to_int_range("multipart_size", part_size),
        threshold=threshold,
        buffer_size=fast_upload_buffer_size(settings),
    )
