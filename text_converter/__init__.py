"""Text Converter: conversions between narrow, wide and UTF encodings.

WHY: Character data reaches us in several representations: narrow byte
strings that are either fixed width (Latin-1 style) or of unknown multibyte
encoding, platform wide characters whose width depends on the platform,
UTF-8 byte buffers, UTF-16 and UTF-32. Code that talks to native APIs needs
to move between all of them without guessing encodings.

HOW: Three layers: codec primitives (core.codecs), generic drivers that
decode to code points and re-encode (core.drivers, with the wide width
resolved once in core.width), and the public conversion matrix
(converters). The ``to_*`` functions re-exported here pick the right
per-pair converter from the Python type of the value.

RULES:
- The source encoding is asserted by the caller, never detected
- ``None`` always converts to an empty result
- Invalid input raises EncodingError; there is no replacement character
- Narrowing to a string truncates silently unless ``strict=True``
"""

from text_converter.compare import are_equal_ignore_case
from text_converter.converters import (
    to_legacy_string,
    to_string,
    to_utf8,
    to_utf16,
    to_utf32,
    to_wstring,
)
from text_converter.core.errors import EncodingError, NarrowingError
from text_converter.core.representations import UTF16String, UTF32String, WString

__version__ = "0.1.0"

__all__ = [
    "EncodingError",
    "NarrowingError",
    "UTF16String",
    "UTF32String",
    "WString",
    "are_equal_ignore_case",
    "to_legacy_string",
    "to_string",
    "to_utf8",
    "to_utf16",
    "to_utf32",
    "to_wstring",
]
