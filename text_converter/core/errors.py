"""Exception types raised by the conversion library.

WHY: Callers need to tell malformed input apart from programming errors
(wrong argument types) and from configuration problems. A single typed
exception with the failing position makes bad data easy to report.

HOW: EncodingError subclasses ValueError (the input value is invalid).
NarrowingError refines it for the opt-in strict narrowing conversions.

RULES:
- Empty or None input is never an error
- Lossy narrowing is only an error when the caller asked for strict mode
"""

from __future__ import annotations

from typing import Optional


class EncodingError(ValueError):
    """Raised when a sequence is not valid in its declared encoding.

    WHY: Decoding must fail rather than substitute U+FFFD. The whole
    conversion aborts and the caller gets no partial result.

    HOW: Raised by the codec primitives on an invalid start byte, an
    invalid continuation byte, truncated input, or a code point that the
    destination encoding cannot represent. read_narrow raises it with
    encoding "narrow" for a str character above U+00FF.

    RULES:
    - encoding is the codec name, e.g. "utf-8"
    - position is the index of the first unit of the failing sequence,
      or None when encoding a code point
    """

    def __init__(self, encoding: str, reason: str, position: Optional[int] = None) -> None:
        self.encoding = encoding
        self.reason = reason
        self.position = position
        if position is None:
            message = "Cannot convert {}: {}".format(encoding, reason)
        else:
            message = "Invalid {} sequence at unit {}: {}".format(encoding, position, reason)
        super().__init__(message)


class NarrowingError(EncodingError):
    """Raised by strict narrowing when a code point does not fit in one byte."""

    def __init__(self, code_point: int, position: int) -> None:
        self.code_point = code_point
        super().__init__(
            "narrow",
            "U+{:04X} does not fit in a narrow unit".format(code_point),
            position,
        )
