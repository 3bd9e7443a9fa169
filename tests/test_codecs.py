"""Unit tests for the codec primitives.

WHY: Every conversion in the library is built from these decode/encode
functions. A wrong bit shift or a missed validation here corrupts every
conversion that goes through UTF-8 or UTF-16.

HOW: Tests cover each UTF-8 sequence length, the malformed-input cases
(invalid start byte, invalid continuation, truncation, overlongs, values
above U+10FFFF), surrogate pair handling in UTF-16, and the range checks
on encode.

RULES:
- Expected byte values are written out literally.
- Positions in EncodingError refer to the first unit of the bad sequence.
"""

import pytest

from text_converter.core.codecs import (
    MAX_CODE_POINT,
    UTF8,
    UTF16,
    UTF32,
    decode_utf8,
    decode_utf16,
    decode_utf32,
    encode_utf8,
    encode_utf16,
    encode_utf32,
    utf8_sequence_length,
)
from text_converter.core.errors import EncodingError


class TestUTF8Decode:
    """decode_utf8 returns (code point, bytes consumed)."""

    def test_ascii(self):
        assert decode_utf8(b"A", 0) == (0x41, 1)

    def test_two_byte(self):
        assert decode_utf8(b"\xc3\xa9", 0) == (0xE9, 2)

    def test_three_byte(self):
        assert decode_utf8(b"\xe2\x82\xac", 0) == (0x20AC, 3)

    def test_four_byte(self):
        assert decode_utf8(b"\xf0\x9f\x98\x80", 0) == (0x1F600, 4)

    def test_decodes_from_offset(self):
        assert decode_utf8(b"ab\xc3\xa9", 2) == (0xE9, 2)

    def test_max_code_point(self):
        assert decode_utf8(b"\xf4\x8f\xbf\xbf", 0) == (MAX_CODE_POINT, 4)

    def test_accepts_list_of_ints(self):
        assert decode_utf8([0xC3, 0xA9], 0) == (0xE9, 2)

    def test_encoded_surrogate_passes_through(self):
        assert decode_utf8(b"\xed\xa0\x80", 0) == (0xD800, 3)


class TestUTF8DecodeErrors:
    """Malformed UTF-8 raises EncodingError instead of being repaired."""

    def test_overlong_lead_c0(self):
        with pytest.raises(EncodingError) as exc_info:
            decode_utf8(b"\xc0\x80", 0)
        assert exc_info.value.encoding == "utf-8"
        assert "invalid start byte" in exc_info.value.reason
        assert exc_info.value.position == 0

    def test_lone_continuation_byte(self):
        with pytest.raises(EncodingError, match="invalid start byte"):
            decode_utf8(b"\x80", 0)

    def test_lead_above_f4(self):
        with pytest.raises(EncodingError, match="invalid start byte"):
            decode_utf8(b"\xf5\x80\x80\x80", 0)

    def test_invalid_continuation(self):
        with pytest.raises(EncodingError, match="invalid continuation byte"):
            decode_utf8(b"\xc3\x28", 0)

    def test_overlong_three_byte(self):
        with pytest.raises(EncodingError, match="invalid continuation byte"):
            decode_utf8(b"\xe0\x80\xaf", 0)

    def test_overlong_four_byte(self):
        with pytest.raises(EncodingError, match="invalid continuation byte"):
            decode_utf8(b"\xf0\x8f\xbf\xbf", 0)

    def test_above_max_code_point(self):
        with pytest.raises(EncodingError, match="invalid continuation byte"):
            decode_utf8(b"\xf4\x90\x80\x80", 0)

    def test_bad_third_byte(self):
        with pytest.raises(EncodingError, match="invalid continuation byte"):
            decode_utf8(b"\xe2\x82\x41", 0)

    def test_truncated_sequence(self):
        with pytest.raises(EncodingError, match="unexpected end of data"):
            decode_utf8(b"\xe2\x82", 0)

    def test_truncated_lead_only(self):
        with pytest.raises(EncodingError, match="unexpected end of data"):
            decode_utf8(b"ab\xf0", 2)

    def test_error_position_is_sequence_start(self):
        with pytest.raises(EncodingError) as exc_info:
            decode_utf8(b"ab\xe2\x82\x41", 2)
        assert exc_info.value.position == 2
        assert "unit 2" in str(exc_info.value)


class TestUTF8SequenceLength:
    @pytest.mark.parametrize("lead,expected", [
        (0x00, 1), (0x7F, 1),
        (0x80, 0), (0xBF, 0), (0xC0, 0), (0xC1, 0),
        (0xC2, 2), (0xDF, 2),
        (0xE0, 3), (0xEF, 3),
        (0xF0, 4), (0xF4, 4),
        (0xF5, 0), (0xFF, 0),
    ])
    def test_lengths(self, lead, expected):
        assert utf8_sequence_length(lead) == expected


class TestUTF8Encode:
    """encode_utf8 uses 1-4 bytes depending on magnitude."""

    def test_one_byte_boundary(self):
        assert encode_utf8(0x7F) == b"\x7f"

    def test_two_byte_boundaries(self):
        assert encode_utf8(0x80) == b"\xc2\x80"
        assert encode_utf8(0x7FF) == b"\xdf\xbf"

    def test_three_byte_boundaries(self):
        assert encode_utf8(0x800) == b"\xe0\xa0\x80"
        assert encode_utf8(0xFFFF) == b"\xef\xbf\xbf"

    def test_four_byte(self):
        assert encode_utf8(0x1F600) == b"\xf0\x9f\x98\x80"
        assert encode_utf8(MAX_CODE_POINT) == b"\xf4\x8f\xbf\xbf"

    def test_lone_surrogate(self):
        assert encode_utf8(0xDC00) == b"\xed\xb0\x80"

    def test_above_range_raises(self):
        with pytest.raises(EncodingError) as exc_info:
            encode_utf8(0x110000)
        assert exc_info.value.position is None

    def test_negative_raises(self):
        with pytest.raises(EncodingError):
            encode_utf8(-1)


class TestUTF16:
    """Surrogate pairs above the BMP, everything else one unit."""

    def test_bmp_encode(self):
        assert encode_utf16(0x20AC) == (0x20AC,)

    def test_supplementary_encode(self):
        assert encode_utf16(0x1F600) == (0xD83D, 0xDE00)

    def test_first_supplementary_code_point(self):
        assert encode_utf16(0x10000) == (0xD800, 0xDC00)

    def test_last_code_point(self):
        assert encode_utf16(MAX_CODE_POINT) == (0xDBFF, 0xDFFF)

    def test_encode_above_range_raises(self):
        with pytest.raises(EncodingError):
            encode_utf16(0x110000)

    def test_pair_decode(self):
        assert decode_utf16([0xD83D, 0xDE00], 0) == (0x1F600, 2)

    def test_bmp_decode(self):
        assert decode_utf16([0x41, 0x42], 1) == (0x42, 1)

    def test_lone_high_surrogate_at_end(self):
        assert decode_utf16([0x41, 0xD83D], 1) == (0xD83D, 1)

    def test_high_surrogate_followed_by_non_surrogate(self):
        assert decode_utf16([0xD83D, 0x41], 0) == (0xD83D, 1)

    def test_lone_low_surrogate(self):
        assert decode_utf16([0xDE00], 0) == (0xDE00, 1)


class TestUTF32:
    def test_identity(self):
        assert decode_utf32([0x1F600], 0) == (0x1F600, 1)
        assert encode_utf32(0x1F600) == (0x1F600,)

    def test_encode_above_range_raises(self):
        with pytest.raises(EncodingError):
            encode_utf32(0x110000)


class TestCodecConstants:
    def test_unit_widths(self):
        assert (UTF8.unit_bits, UTF16.unit_bits, UTF32.unit_bits) == (8, 16, 32)

    def test_codec_functions_are_bound(self):
        assert UTF8.decode(b"\xc3\xa9", 0) == (0xE9, 2)
        assert UTF16.encode(0x1F600) == (0xD83D, 0xDE00)
