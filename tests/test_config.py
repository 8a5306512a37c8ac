"""Tests for object-store settings."""

import pytest

from src.core.config import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, settings: Settings) -> None:
        """Test defaults when nothing is configured."""
        assert settings.multipart_size is None
        assert settings.multipart_threshold is None
        assert settings.fast_upload_buffer_size == 64 * 1024 * 1024

    def test_environment_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("OBJSTORE_MULTIPART_THRESHOLD", "32MiB")

        settings = Settings(_env_file=None)

        assert settings.multipart_threshold == 32 * 1024 * 1024

    def test_get_settings_is_cached(self) -> None:
        """Test get_settings returns one instance until reset."""
        reset_settings()
        first = get_settings()

        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
        reset_settings()
