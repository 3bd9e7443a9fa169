"""Routing of wide character conversions to the UTF-16 or UTF-32 codec.

WHY: A wide character string is UTF-16 on platforms with a 2-byte
``wchar_t`` and UTF-32 on platforms with a 4-byte one. The library has no
say in this, and a process must never mix the two, so the choice is made
once when the module is imported rather than tested inside every call.

HOW: A WideDispatch bundles the wide codec with pre-bound conversion
functions to and from UTF-16 and UTF-32. For the codec matching the wide
width the function is a plain copy, for the other one it is a transcode.
WIDE holds the dispatch for config.WCHAR_WIDTH; converters only ever call
through it.

RULES:
- Exactly two dispatches exist, for widths 2 and 4
- WIDE is resolved on import and never replaced
- Dispatch functions take and return plain lists of code units
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Dict, List

from text_converter import config
from text_converter.core.codecs import UTF16, UTF32, Codec
from text_converter.core.drivers import copy_units, transcode

logger = logging.getLogger(__name__)

UnitConverter = Callable[[Sequence[int]], List[int]]


@dataclass(frozen=True)
class WideDispatch:
    """Wide character conversions bound for one ``wchar_t`` width.

    Attributes:
        width: Bytes per wide unit (2 or 4).
        codec: UTF16 for width 2, UTF32 for width 4.
        to_utf16: Wide units → UTF-16 units.
        from_utf16: UTF-16 units → wide units.
        to_utf32: Wide units → UTF-32 units.
        from_utf32: UTF-32 units → wide units.
    """

    width: int
    codec: Codec
    to_utf16: UnitConverter
    from_utf16: UnitConverter
    to_utf32: UnitConverter
    from_utf32: UnitConverter

    @property
    def unit_bits(self) -> int:
        return self.width * 8


def _transcoder(source: Codec, destination: Codec) -> UnitConverter:
    return functools.partial(transcode, source=source, destination=destination)


_DISPATCH: Dict[int, WideDispatch] = {
    2: WideDispatch(
        width=2,
        codec=UTF16,
        to_utf16=copy_units,
        from_utf16=copy_units,
        to_utf32=_transcoder(UTF16, UTF32),
        from_utf32=_transcoder(UTF32, UTF16),
    ),
    4: WideDispatch(
        width=4,
        codec=UTF32,
        to_utf16=_transcoder(UTF32, UTF16),
        from_utf16=_transcoder(UTF16, UTF32),
        to_utf32=copy_units,
        from_utf32=copy_units,
    ),
}


def dispatch_for(width: int) -> WideDispatch:
    """Return the WideDispatch for a ``wchar_t`` width of 2 or 4 bytes.

    Raises:
        ValueError: If ``width`` is not a supported width.
    """
    try:
        return _DISPATCH[width]
    except KeyError:
        raise ValueError(
            "No wide character dispatch for width {}. Available: {}".format(
                width, ", ".join(str(w) for w in sorted(_DISPATCH))
            )
        ) from None


WIDE = dispatch_for(config.WCHAR_WIDTH)
logger.debug("Wide conversions routed through %s", WIDE.codec.name)
