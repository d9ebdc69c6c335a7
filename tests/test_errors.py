"""Tests for logscope error types."""

from logscope.core.errors import ConfigError, InvalidFileError


class TestInvalidFileError:
    def test_message_names_path(self) -> None:
        err = InvalidFileError("/etc/shadow")
        assert str(err) == "/etc/shadow is not valid."
        assert err.path == "/etc/shadow"

    def test_equality_by_path(self) -> None:
        assert InvalidFileError("/a") == InvalidFileError("/a")
        assert InvalidFileError("/a") != InvalidFileError("/b")
        assert len({InvalidFileError("/a"), InvalidFileError("/a")}) == 1

    def test_is_value_error(self) -> None:
        assert isinstance(InvalidFileError("/a"), ValueError)
        assert issubclass(ConfigError, ValueError)
