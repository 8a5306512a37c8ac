"""Tests for error kinds."""

from src.core.enums import ErrorKind


class TestErrorKind:
    """Tests for ErrorKind enum."""

    def test_string_values(self) -> None:
        """Test kinds compare equal to their string values."""
        assert ErrorKind.NOT_FOUND == "not_found"
        assert ErrorKind("access_denied") is ErrorKind.ACCESS_DENIED

    def test_kinds_are_distinct(self) -> None:
        """Test every kind has its own value."""
        values = [kind.value for kind in ErrorKind]

        assert len(values) == len(set(values)) == 9
