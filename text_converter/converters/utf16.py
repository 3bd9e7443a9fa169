"""Conversions into UTF16String."""

from __future__ import annotations

from typing import Optional

from text_converter.core.codecs import UTF8, UTF16, UTF32
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


def from_narrow(value: Optional[str], fixed_width: bool = True) -> UTF16String:
    """Widen a narrow string to UTF-16.

    With ``fixed_width`` each narrow unit becomes one UTF-16 unit.
    Otherwise the narrow units are decoded as UTF-8 first.
    """
    units = read_narrow(value)
    if fixed_width:
        return UTF16String.from_units(straight_widen(units, UTF16.unit_bits))
    return UTF16String.from_units(transcode(units, UTF8, UTF16))


def from_utf8(value: Optional[BytesLike]) -> UTF16String:
    return UTF16String.from_units(transcode(read_bytes(value), UTF8, UTF16))


def from_utf16(value: Optional[UTF16String]) -> UTF16String:
    return UTF16String.from_units(copy_units(read_units(value)))


def from_utf32(value: Optional[UTF32String]) -> UTF16String:
    return UTF16String.from_units(transcode(read_units(value), UTF32, UTF16))


def from_wide(value: Optional[WString]) -> UTF16String:
    return UTF16String.from_units(WIDE.to_utf16(read_units(value)))
