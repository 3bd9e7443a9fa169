"""Conversions into narrow strings.

WHY: Plenty of consumers only understand one byte per character. Turning
wider text into such a string cannot be exact, and the long-standing
behaviour is to keep the low byte of every code point. That stays the
default; ``strict=True`` is available for callers who would rather fail.

HOW: Sources are decoded with their codec (the WIDE codec for wide
strings), keeping the unit offset of every code point, then narrowed with
straight_widen to 8 bits.

RULES:
- Default narrowing is lossy and silent: U+1F641 becomes "A" (0x41)
- strict=True raises NarrowingError for any code point above U+00FF, at
  the unit offset where its sequence starts
- A str source holding a character above U+00FF always raises EncodingError
- A narrow source with fixed_width=True is copied up to its first NUL
- A None source gives ""
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import List, Optional

from text_converter.core.codecs import UTF8, UTF16, UTF32, Codec
from text_converter.core.drivers import (
    NARROW_UNIT_BITS,
    BytesLike,
    iter_decoded,
    read_bytes,
    read_narrow,
    read_units,
    straight_widen,
)
from text_converter.core.errors import NarrowingError
from text_converter.core.representations import UTF16String, UTF32String, WString
from text_converter.core.width import WIDE

_NARROW_MAX = (1 << NARROW_UNIT_BITS) - 1


def _narrow(units: Sequence[int], codec: Codec, strict: bool) -> str:
    code_points = []  # type: List[int]
    for offset, code_point in iter_decoded(units, codec):
        if strict and code_point > _NARROW_MAX:
            raise NarrowingError(code_point, offset)
        code_points.append(code_point)
    return "".join(chr(unit) for unit in straight_widen(code_points, NARROW_UNIT_BITS))


def from_narrow(value: Optional[str], fixed_width: bool = True, strict: bool = False) -> str:
    """Copy a narrow string, or decode it as UTF-8 and narrow the result.

    Args:
        value: Narrow string. Characters above U+00FF raise EncodingError
            whatever the other flags say.
        fixed_width: True to copy the units, False to treat them as UTF-8
            multibyte data.
        strict: Raise NarrowingError instead of truncating a decoded code
            point. A fixed-width copy never needs truncating.
    """
    units = read_narrow(value)
    if fixed_width:
        return "".join(chr(unit) for unit in units)
    return _narrow(units, UTF8, strict)


def from_utf8(value: Optional[BytesLike], strict: bool = False) -> str:
    return _narrow(read_bytes(value), UTF8, strict)


def from_utf16(value: Optional[UTF16String], strict: bool = False) -> str:
    return _narrow(read_units(value), UTF16, strict)


def from_utf32(value: Optional[UTF32String], strict: bool = False) -> str:
    return _narrow(read_units(value), UTF32, strict)


def from_wide(value: Optional[WString], strict: bool = False) -> str:
    return _narrow(read_units(value), WIDE.codec, strict)
