"""Unit tests for shared ASCII helpers."""

import pytest

from rfc7617._ascii import is_utf8_encodable, match_prefix, prepare, strip_ows, to_bytes
from rfc7617.constants import SCHEME_PREFIX, ParseMode


class TestMatchPrefix:
    """Test case-insensitive literal prefix matching."""

    @pytest.mark.parametrize("data", [b"Basic abc", b"basic abc", b"BASIC abc", b"bAsIc abc"])
    def test_match(self, data: bytes) -> None:
        """Test that letters match in any case and the remainder is returned."""
        assert match_prefix(data, SCHEME_PREFIX) == (True, b"abc")

    def test_exact_length(self) -> None:
        """Test a match consuming the whole input."""
        assert match_prefix(b"BASIC ", SCHEME_PREFIX) == (True, b"")

    @pytest.mark.parametrize("data", [b"Basic\tabc", b"Basicabc", b"Basix abc", b"Bas", b""])
    def test_mismatch(self, data: bytes) -> None:
        """Test that mismatches return the input unchanged."""
        assert match_prefix(data, SCHEME_PREFIX) == (False, data)

    def test_non_letters_exact(self) -> None:
        """Test that non-letter bytes are not case folded."""
        # 0x40 "@" and 0x60 "`" differ only in the 0x20 bit
        assert match_prefix(b"@x", b"`") == (False, b"@x")
        assert match_prefix(b"[x", b"{") == (False, b"[x")


class TestNormalization:
    """Test header value normalization."""

    def test_to_bytes(self) -> None:
        assert to_bytes("Basic ü") == "Basic ü".encode()
        assert to_bytes(bytearray(b"abc")) == b"abc"
        assert to_bytes(memoryview(b"abc")) == b"abc"

    def test_strip_ows_only_space_and_tab(self) -> None:
        assert strip_ows(" \t x \t ") == "x"
        assert strip_ows("\r\nx\r\n") == "\r\nx\r\n"

    def test_prepare_strict(self) -> None:
        assert prepare(" Basic x ", ParseMode.STRICT) == b" Basic x "

    def test_prepare_lenient(self) -> None:
        assert prepare(" \t\r\nBasic x\r\n", ParseMode.LENIENT) == b"Basic x"

    def test_is_utf8_encodable(self) -> None:
        assert is_utf8_encodable("Wälle 世界")
        assert not is_utf8_encodable("a\ud800b")
