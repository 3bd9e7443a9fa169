"""Public conversion matrix: one converter per (source, destination) pair.

WHY: Callers mostly want "give me UTF-16 of this", whatever "this" is. A
central registry maps each pair of representations to its converter, so
the ``to_*`` entry points can pick one from the type of the value and the
per-pair functions stay directly callable when the type is known.

HOW: CONVERTERS maps ``(source, destination)`` Representation keys to the
``from_*`` functions of the destination modules (utf8, utf16, utf32,
narrow, wide). representation_of() maps a Python value to its
Representation: ``str`` is narrow, bytes-like is UTF-8, and the code unit
string types map to themselves. to_legacy_string() is kept apart on
purpose: it is not a conversion, it is a raw byte copy.

RULES:
- ``fixed_width`` only applies to narrow (str) sources; passing
  ``fixed_width=False`` with any other source raises TypeError
- ``strict`` only exists on to_string()
- None is a null pointer: it converts to the empty destination value
- Unsupported value types raise TypeError
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any, Dict, Optional, Tuple

from text_converter.converters import legacy, narrow, utf8, utf16, utf32, wide
from text_converter.core.drivers import BytesLike
from text_converter.core.representations import UTF16String, UTF32String, WString

logger = logging.getLogger(__name__)


class Representation(str, enum.Enum):
    NARROW = "narrow"
    UTF8 = "utf8"
    UTF16 = "utf16"
    UTF32 = "utf32"
    WIDE = "wide"


_MODULES = {
    Representation.NARROW: narrow,
    Representation.UTF8: utf8,
    Representation.UTF16: utf16,
    Representation.UTF32: utf32,
    Representation.WIDE: wide,
}

_SOURCE_FUNCTIONS = {
    Representation.NARROW: "from_narrow",
    Representation.UTF8: "from_utf8",
    Representation.UTF16: "from_utf16",
    Representation.UTF32: "from_utf32",
    Representation.WIDE: "from_wide",
}

CONVERTERS: Dict[Tuple[Representation, Representation], Callable[..., Any]] = {
    (source, destination): getattr(module, function_name)
    for destination, module in _MODULES.items()
    for source, function_name in _SOURCE_FUNCTIONS.items()
}


def representation_of(value: Any) -> Representation:
    """Map a Python value to the Representation it carries.

    RULES:
    - None → NARROW (a null ``char`` pointer)
    - str → NARROW; bytes, bytearray, memoryview → UTF8
    - UTF16String, UTF32String, WString → UTF16, UTF32, WIDE

    Raises:
        TypeError: For any other type.
    """
    if value is None or isinstance(value, str):
        return Representation.NARROW
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Representation.UTF8
    if isinstance(value, UTF16String):
        return Representation.UTF16
    if isinstance(value, UTF32String):
        return Representation.UTF32
    if isinstance(value, WString):
        return Representation.WIDE
    raise TypeError("Cannot convert values of type {}".format(type(value).__name__))


def convert(value: Any, destination: Representation, fixed_width: bool = True, **kwargs: Any) -> Any:
    """Convert ``value`` to ``destination`` using the registered converter.

    Args:
        value: Source value, or None.
        destination: Representation to produce.
        fixed_width: For narrow sources, whether one unit is one code point.
        **kwargs: Passed through to the converter (``strict`` for narrow
            destinations).

    Returns:
        The converted value, a new object.
    """
    source = representation_of(value)
    converter = CONVERTERS[(source, destination)]
    logger.debug("Converting %s -> %s", source.value, destination.value)

    if source is Representation.NARROW:
        return converter(value, fixed_width=fixed_width, **kwargs)
    if not fixed_width:
        raise TypeError(
            "fixed_width only applies to narrow strings, not {}".format(source.value)
        )
    return converter(value, **kwargs)


def to_utf8(value: Any, fixed_width: bool = True) -> bytes:
    """Convert to a null-terminated UTF-8 byte buffer."""
    return convert(value, Representation.UTF8, fixed_width)


def to_utf16(value: Any, fixed_width: bool = True) -> UTF16String:
    return convert(value, Representation.UTF16, fixed_width)


def to_utf32(value: Any, fixed_width: bool = True) -> UTF32String:
    return convert(value, Representation.UTF32, fixed_width)


def to_wstring(value: Any, fixed_width: bool = True) -> WString:
    return convert(value, Representation.WIDE, fixed_width)


def to_string(value: Any, fixed_width: bool = True, strict: bool = False) -> str:
    """Convert to a narrow string.

    WHY: Narrow strings are the lowest common denominator for logging,
    legacy APIs and byte-oriented protocols.

    HOW: Dispatches to converters.narrow. Wider text is narrowed by keeping
    the low byte of each code point.

    RULES:
    - Lossy by default: code points above U+00FF are truncated, not rejected
    - strict=True raises NarrowingError instead of truncating
    - A str value holding a character above U+00FF raises EncodingError
    - Callers that need exact text should compare a round trip themselves
      or use strict=True
    """
    return convert(value, Representation.NARROW, fixed_width, strict=strict)


def to_legacy_string(value: Optional[BytesLike]) -> str:
    """Copy multibyte bytes of unknown encoding into a narrow string unchanged.

    Only for migrating existing code. This performs no validation and no
    transcoding: ``b"\\xC3\\x28"`` (invalid UTF-8) comes back as
    ``"\\xC3("``. Use to_string() when the bytes are known to be UTF-8.

    Raises:
        TypeError: If ``value`` is not bytes-like (or None).
    """
    if value is not None and not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(
            "to_legacy_string expects bytes, not {}".format(type(value).__name__)
        )
    return legacy.from_bytes(value)
