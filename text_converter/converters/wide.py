"""Conversions into WString (platform wide characters).

WHY: Wide strings are what native APIs expect, but their encoding depends
on the platform ``wchar_t`` width. Callers should not have to care.

HOW: Everything goes through the WIDE dispatch resolved in core.width:
UTF-16 and UTF-32 sources use its pre-bound to/from functions, UTF-8 and
multibyte narrow sources transcode into WIDE.codec, and fixed-width narrow
sources are widened to WIDE.unit_bits.

RULES:
- The wide width is never inspected here; only WIDE is consulted
- A None source gives an empty WString
"""

from __future__ import annotations

from typing import Optional

from text_converter.core.codecs import UTF8
from text_converter.core.drivers import (
    BytesLike,
    copy_units,
    read_bytes,
    read_narrow,
    read_units,
    straight_widen,
    transcode,
)
from text_converter.core.representations import UTF16String, UTF32String, WString
from text_converter.core.width import WIDE


def from_narrow(value: Optional[str], fixed_width: bool = True) -> WString:
    units = read_narrow(value)
    if fixed_width:
        return WString.from_units(straight_widen(units, WIDE.unit_bits))
    return WString.from_units(transcode(units, UTF8, WIDE.codec))


def from_utf8(value: Optional[BytesLike]) -> WString:
    return WString.from_units(transcode(read_bytes(value), UTF8, WIDE.codec))


def from_utf16(value: Optional[UTF16String]) -> WString:
    return WString.from_units(WIDE.from_utf16(read_units(value)))


def from_utf32(value: Optional[UTF32String]) -> WString:
    return WString.from_units(WIDE.from_utf32(read_units(value)))


def from_wide(value: Optional[WString]) -> WString:
    return WString.from_units(copy_units(read_units(value)))
