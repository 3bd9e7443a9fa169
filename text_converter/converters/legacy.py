"""Legacy multibyte pass-through.

WHY: Some existing code holds multibyte byte strings whose encoding is
simply not known (a system code page, Shift-JIS, UTF-8, ...). Those bytes
must reach a narrow string untouched; decoding them with any particular
encoding would corrupt the others.

HOW: Copies the raw bytes up to the first zero into a narrow str, one
character per byte.

RULES:
- No validation and no transcoding, ever. Invalid UTF-8 is fine here
- Not a UTF-8 entry point; use converters.narrow for decoded text
- Only for migrating existing code: the result is ambiguous (is it fixed
  width or not?) once it is passed along
- A None source gives ""
"""

from __future__ import annotations

from typing import Optional

from text_converter.core.drivers import BytesLike, read_bytes


def from_bytes(value: Optional[BytesLike]) -> str:
    return "".join(chr(unit) for unit in read_bytes(value))
