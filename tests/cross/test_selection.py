"""
Unit tests for platform list parsing and the set-once selection.
"""

import pytest

from gobuild.core.exceptions import (
    InvalidPlatformError,
    PlatformAlreadySetError,
    PlatformError,
)
from gobuild.cross.selection import PlatformSelection, parse_platform_list
from gobuild.cross.targets import CrossCompileTarget


class TestParsePlatformList:
    """Tests for parse_platform_list."""

    def test_single(self):
        """Test single identifier."""
        assert parse_platform_list("Linux-AMD64") == ["Linux-AMD64"]

    def test_keeps_order_and_casing(self):
        """Test input order and original casing are preserved."""
        result = parse_platform_list("windows-amd64,Darwin-ARM64,LINUX-386")
        assert result == ["windows-amd64", "Darwin-ARM64", "LINUX-386"]

    def test_strips_whitespace(self):
        """Test whitespace around tokens is removed."""
        result = parse_platform_list("  Linux-AMD64 , Darwin-AMD64\t,Js-WASM ")
        assert result == ["Linux-AMD64", "Darwin-AMD64", "Js-WASM"]

    def test_keeps_duplicates(self):
        """Test repeated identifiers are kept as given."""
        assert parse_platform_list("Linux-ARM,linux-arm") == ["Linux-ARM", "linux-arm"]

    def test_invalid_token(self):
        """Test unknown token is rejected."""
        with pytest.raises(InvalidPlatformError) as exc_info:
            parse_platform_list("Linux-AMD64,BadPlatform")

        assert exc_info.value.identifier == "BadPlatform"

    @pytest.mark.parametrize("value", ["", " ", "Linux-AMD64,", ",Linux-AMD64", "a,,b"])
    def test_empty_tokens_are_invalid(self, value):
        """Test empty entries are invalid platforms."""
        with pytest.raises(InvalidPlatformError):
            parse_platform_list(value)


class TestPlatformSelection:
    """Tests for PlatformSelection."""

    def test_initially_empty(self):
        """Test new selection is empty and unset."""
        selection = PlatformSelection()

        assert not selection
        assert len(selection) == 0
        assert selection.is_set is False
        assert selection.platforms == ()

    def test_set(self):
        """Test setting a valid list."""
        selection = PlatformSelection()
        selection.set("Linux-AMD64, darwin-arm64")

        assert selection
        assert selection.is_set is True
        assert list(selection) == ["Linux-AMD64", "darwin-arm64"]
        assert selection.platforms == ("Linux-AMD64", "darwin-arm64")

    def test_set_twice_fails(self):
        """Test second set fails even with a valid list."""
        selection = PlatformSelection()
        selection.set("Linux-AMD64")

        with pytest.raises(PlatformAlreadySetError):
            selection.set("Windows-AMD64")

        assert list(selection) == ["Linux-AMD64"]

    def test_set_twice_with_invalid_list_reports_already_set(self):
        """Test already-set check happens before validation."""
        selection = PlatformSelection()
        selection.set("Linux-AMD64")

        with pytest.raises(PlatformAlreadySetError):
            selection.set("BadPlatform")

    def test_invalid_leaves_selection_empty(self):
        """Test no partial acceptance."""
        selection = PlatformSelection()

        with pytest.raises(InvalidPlatformError):
            selection.set("Linux-AMD64,Darwin-AMD64,BadPlatform")

        assert len(selection) == 0
        assert selection.is_set is False

    def test_errors_share_base_class(self):
        """Test both selection errors are PlatformError."""
        assert issubclass(InvalidPlatformError, PlatformError)
        assert issubclass(PlatformAlreadySetError, PlatformError)

    def test_targets(self):
        """Test targets are resolved in order with display names kept."""
        selection = PlatformSelection()
        selection.set("linux-amd64,Windows-386")

        assert list(selection.targets()) == [
            ("linux-amd64", CrossCompileTarget("linux", "amd64")),
            ("Windows-386", CrossCompileTarget("windows", "386")),
        ]

    def test_platforms_is_a_copy(self):
        """Test callers cannot change the selection through platforms."""
        selection = PlatformSelection()
        selection.set("Linux-AMD64")

        assert isinstance(selection.platforms, tuple)

    def test_repr(self):
        """Test repr lists the platforms."""
        selection = PlatformSelection()
        selection.set("Js-WASM")

        assert "Js-WASM" in repr(selection)
