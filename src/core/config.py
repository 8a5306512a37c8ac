"""Object-store client configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import ByteSize, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Environment variable the client reads its endpoint from, quoted in redirect diagnostics
ENDPOINT_URL = "OBJSTORE_ENDPOINT_URL"


class Settings(BaseSettings):
    """Object-store settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="objstore_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upload sizing; unset sizes fall back to the caller's default
    multipart_size: ByteSize | None = Field(
        default=None,
        description="Size of each multipart upload part (e.g. 8MiB)",
    )
    multipart_threshold: ByteSize | None = Field(
        default=None,
        description="Object size above which uploads switch to multipart",
    )
    fast_upload_buffer_size: ByteSize = Field(
        default=ByteSize(64 * 1024 * 1024),
        description="In-memory buffer for fast uploads, capped to 32-bit range",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    get_settings.cache_clear()
