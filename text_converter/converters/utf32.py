"""Conversions into UTF32String."""

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


def from_narrow(value: Optional[str], fixed_width: bool = True) -> UTF32String:
    units = read_narrow(value)
    if fixed_width:
        return UTF32String.from_units(straight_widen(units, UTF32.unit_bits))
    return UTF32String.from_units(transcode(units, UTF8, UTF32))


def from_utf8(value: Optional[BytesLike]) -> UTF32String:
    return UTF32String.from_units(transcode(read_bytes(value), UTF8, UTF32))


def from_utf16(value: Optional[UTF16String]) -> UTF32String:
    return UTF32String.from_units(transcode(read_units(value), UTF16, UTF32))


def from_utf32(value: Optional[UTF32String]) -> UTF32String:
    return UTF32String.from_units(copy_units(read_units(value)))


def from_wide(value: Optional[WString]) -> UTF32String:
    return UTF32String.from_units(WIDE.to_utf32(read_units(value)))
