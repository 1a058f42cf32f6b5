"""Tests for the exception hierarchy."""

from pathlib import Path

from gobuild.core.exceptions import (
    BuildError,
    ConfigError,
    GobuildError,
    InvalidPlatformError,
    OutputDirectoryError,
    PlatformAlreadySetError,
    PlatformError,
    UnsupportedHostError,
)


class TestHierarchy:
    def test_everything_is_gobuild_error(self):
        """Test all errors share the base class."""
        for exc in (
            PlatformError,
            InvalidPlatformError,
            PlatformAlreadySetError,
            UnsupportedHostError,
            BuildError,
            OutputDirectoryError,
            ConfigError,
        ):
            assert issubclass(exc, GobuildError)

    def test_output_directory_is_build_error(self):
        assert issubclass(OutputDirectoryError, BuildError)


class TestMessages:
    def test_invalid_platform(self):
        """Test invalid platform message and attribute."""
        error = InvalidPlatformError("Linux-RISCV")

        assert error.identifier == "Linux-RISCV"
        assert str(error) == "invalid platform: 'Linux-RISCV'"

    def test_already_set(self):
        assert str(PlatformAlreadySetError()) == "platform flag already set"

    def test_output_directory(self):
        """Test output directory message keeps path and reason."""
        error = OutputDirectoryError(Path("output/linux-amd64"), "Permission denied")

        assert error.path == Path("output/linux-amd64")
        assert error.reason == "Permission denied"
        assert "unable to create output folder" in str(error)
        assert "Permission denied" in str(error)
