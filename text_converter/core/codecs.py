"""Per-code-point encode/decode primitives for UTF-8, UTF-16 and UTF-32.

WHY: All transcoding in the library reduces to "read one code point from
the source" and "write one code point to the destination". Keeping those
two steps as small pure functions makes each encoding testable on its own
and lets the drivers stay generic.

HOW: Each decoder takes a sequence of integer code units and a position and
returns ``(code_point, consumed)``. Each encoder takes a code point and
returns the tuple (or bytes) of units representing it. The Codec dataclass
bundles one decoder/encoder pair with its name and unit width.

RULES:
- Decoders never read past the end of the sequence; truncated input raises
- UTF-8 decoding is strict: overlong forms, C0/C1/F5-FF lead bytes and code
  points above U+10FFFF are rejected
- Surrogate code points (U+D800..U+DFFF) pass through every codec unchanged
- No state escapes a call
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Tuple

from text_converter.core.errors import EncodingError

MAX_CODE_POINT = 0x10FFFF

_SURROGATE_OFFSET = 0x10000
_HIGH_SURROGATE_START = 0xD800
_HIGH_SURROGATE_END = 0xDBFF
_LOW_SURROGATE_START = 0xDC00
_LOW_SURROGATE_END = 0xDFFF

# Allowed range of the second byte, keyed by lead byte. Everything else
# takes the ordinary continuation range 80..BF.
_SECOND_BYTE_RANGES = {
    0xE0: (0xA0, 0xBF),  # no overlong 3-byte forms
    0xF0: (0x90, 0xBF),  # no overlong 4-byte forms
    0xF4: (0x80, 0x8F),  # nothing above U+10FFFF
}


def _check_code_point(encoding: str, code_point: int) -> None:
    if not 0 <= code_point <= MAX_CODE_POINT:
        raise EncodingError(
            encoding, "code point 0x{:X} is outside the Unicode range".format(code_point)
        )


# ---------------------------------------------------------------------------
# UTF-8
# ---------------------------------------------------------------------------


def utf8_sequence_length(lead: int) -> int:
    """Number of bytes in the UTF-8 sequence starting with ``lead``.

    Returns 0 for bytes that can never start a sequence (continuation
    bytes, the overlong leads C0/C1, and F5..FF).
    """
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_utf8(units: Sequence[int], pos: int) -> Tuple[int, int]:
    """Decode one code point from UTF-8 bytes starting at ``pos``.

    WHY: UTF-8 is the only variable-length encoding here where input can be
    malformed in several distinct ways; each must raise rather than be
    repaired.

    HOW: The lead byte gives the sequence length and the payload bits.
    Each continuation byte must match 10xxxxxx (and, for the second byte,
    the narrower range that rules out overlongs and values past U+10FFFF).
    Payload bits are shifted in six at a time.

    RULES:
    - Invalid lead byte → EncodingError("invalid start byte")
    - Bad continuation byte → EncodingError("invalid continuation byte")
    - Sequence runs past the end → EncodingError("unexpected end of data")
    - A bad byte is reported before a missing one

    Returns:
        Tuple of (code point, number of bytes consumed).
    """
    lead = units[pos]
    if lead < 0x80:
        return lead, 1

    length = utf8_sequence_length(lead)
    if length == 0:
        raise EncodingError("utf-8", "invalid start byte 0x{:02X}".format(lead), pos)

    low, high = _SECOND_BYTE_RANGES.get(lead, (0x80, 0xBF))
    # 110xxxxx, 1110xxxx, 11110xxx: keep the bits below the length marker
    code_point = lead & (0xFF >> (length + 1))

    for offset in range(1, length):
        if pos + offset >= len(units):
            raise EncodingError("utf-8", "unexpected end of data", pos)
        unit = units[pos + offset]
        if offset == 1:
            valid = low <= unit <= high
        else:
            valid = (unit >> 6) == 0b10
        if not valid:
            raise EncodingError(
                "utf-8", "invalid continuation byte 0x{:02X}".format(unit), pos
            )
        code_point = (code_point << 6) | (unit & 0x3F)

    return code_point, length


def encode_utf8(code_point: int) -> bytes:
    """Encode one code point as 1-4 UTF-8 bytes.

    Lone surrogates are written as their 3-byte form so that they round-trip
    through decode_utf8.
    """
    _check_code_point("utf-8", code_point)

    if code_point < 0x80:
        return bytes((code_point,))
    if code_point < 0x800:
        return bytes((
            0xC0 | (code_point >> 6),
            0x80 | (code_point & 0x3F),
        ))
    if code_point < 0x10000:
        return bytes((
            0xE0 | (code_point >> 12),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
        ))
    return bytes((
        0xF0 | (code_point >> 18),
        0x80 | ((code_point >> 12) & 0x3F),
        0x80 | ((code_point >> 6) & 0x3F),
        0x80 | (code_point & 0x3F),
    ))


# ---------------------------------------------------------------------------
# UTF-16
# ---------------------------------------------------------------------------


def decode_utf16(units: Sequence[int], pos: int) -> Tuple[int, int]:
    """Decode one code point from UTF-16 units starting at ``pos``.

    A high surrogate immediately followed by a low surrogate is combined.
    Any other surrogate unit is returned as-is with a length of 1.
    """
    unit = units[pos]
    if _HIGH_SURROGATE_START <= unit <= _HIGH_SURROGATE_END and pos + 1 < len(units):
        following = units[pos + 1]
        if _LOW_SURROGATE_START <= following <= _LOW_SURROGATE_END:
            code_point = _SURROGATE_OFFSET + (
                ((unit - _HIGH_SURROGATE_START) << 10) | (following - _LOW_SURROGATE_START)
            )
            return code_point, 2
    return unit, 1


def encode_utf16(code_point: int) -> Tuple[int, ...]:
    """Encode one code point as one UTF-16 unit or a surrogate pair."""
    _check_code_point("utf-16", code_point)

    if code_point < _SURROGATE_OFFSET:
        return (code_point,)
    offset = code_point - _SURROGATE_OFFSET
    return (
        _HIGH_SURROGATE_START + (offset >> 10),
        _LOW_SURROGATE_START + (offset & 0x3FF),
    )


# ---------------------------------------------------------------------------
# UTF-32
# ---------------------------------------------------------------------------


def decode_utf32(units: Sequence[int], pos: int) -> Tuple[int, int]:
    return units[pos], 1


def encode_utf32(code_point: int) -> Tuple[int, ...]:
    _check_code_point("utf-32", code_point)
    return (code_point,)


# ---------------------------------------------------------------------------
# Codec registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Codec:
    """One decode/encode pair plus the width of its code unit.

    Attributes:
        name: Codec name used in error messages, e.g. ``"utf-16"``.
        unit_bits: Width of one code unit in bits (8, 16 or 32).
        decode: ``(units, pos) -> (code_point, consumed)``.
        encode: ``code_point -> units``.
    """

    name: str
    unit_bits: int
    decode: Callable[[Sequence[int], int], Tuple[int, int]]
    encode: Callable[[int], Sequence[int]]


UTF8 = Codec("utf-8", 8, decode_utf8, encode_utf8)
UTF16 = Codec("utf-16", 16, decode_utf16, encode_utf16)
UTF32 = Codec("utf-32", 32, decode_utf32, encode_utf32)
