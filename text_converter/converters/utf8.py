"""Conversions into UTF-8 byte buffers.

WHY: UTF-8 is multibyte, so the result is returned as ``bytes`` rather
than ``str`` to keep callers from treating it as a narrow string. Byte
buffers are routinely handed to C APIs, so they are null terminated.

HOW: Every source is transcoded through code points into the UTF8 codec,
then passed through null_terminate. Fixed-width narrow units are already
code points, so they are read with the UTF-32 codec.

RULES:
- Non-empty results end with exactly one zero byte
- UTF-8 input is validated, not copied blindly
- A None source gives b""
"""

from __future__ import annotations

from typing import Optional

from text_converter.core.codecs import UTF8, UTF16, UTF32
from text_converter.core.drivers import (
    BytesLike,
    null_terminate,
    read_bytes,
    read_narrow,
    read_units,
    transcode,
)
from text_converter.core.representations import UTF16String, UTF32String, WString
from text_converter.core.width import WIDE


def from_narrow(value: Optional[str], fixed_width: bool = True) -> bytes:
    """Encode a narrow string as UTF-8.

    Args:
        value: Narrow string, one character per byte unit.
        fixed_width: True to read each unit as a Latin-1 code point, False
            to read the units as UTF-8 multibyte data.
    """
    source = UTF32 if fixed_width else UTF8
    return null_terminate(transcode(read_narrow(value), source, UTF8))


def from_utf8(value: Optional[BytesLike]) -> bytes:
    return null_terminate(transcode(read_bytes(value), UTF8, UTF8))


def from_utf16(value: Optional[UTF16String]) -> bytes:
    return null_terminate(transcode(read_units(value), UTF16, UTF8))


def from_utf32(value: Optional[UTF32String]) -> bytes:
    return null_terminate(transcode(read_units(value), UTF32, UTF8))


def from_wide(value: Optional[WString]) -> bytes:
    return null_terminate(transcode(read_units(value), WIDE.codec, UTF8))
