"""Unit tests for case-insensitive comparison."""

import pytest

from text_converter import UTF16String, UTF32String, are_equal_ignore_case


class TestAreEqualIgnoreCase:
    def test_str(self):
        assert are_equal_ignore_case("Content-Type", "content-type")

    def test_different_length(self):
        assert not are_equal_ignore_case("abc", "abcd")

    def test_different_text(self):
        assert not are_equal_ignore_case("abc", "abd")

    def test_bytes(self):
        assert are_equal_ignore_case(b"UTF-8", bytearray(b"utf-8"))

    def test_code_unit_strings(self):
        assert are_equal_ignore_case(UTF16String.from_text("WAV"), UTF16String.from_text("wav"))

    def test_only_ascii_is_folded(self):
        assert not are_equal_ignore_case("CAFÉ", "café")

    def test_none_is_empty(self):
        assert are_equal_ignore_case(None, "")
        assert not are_equal_ignore_case(None, "a")

    def test_embedded_zero_compared(self):
        assert not are_equal_ignore_case("a\0b", "a\0c")

    def test_mixed_representations_rejected(self):
        with pytest.raises(TypeError):
            are_equal_ignore_case(UTF16String((0x41,)), UTF32String((0x41,)))

    def test_str_and_bytes_rejected(self):
        with pytest.raises(TypeError):
            are_equal_ignore_case("a", b"a")
