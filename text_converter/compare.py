"""Case-insensitive equality for any of the string representations.

WHY: Identifiers such as option names and file extensions are often
compared without regard to case, in whatever representation they arrived.

HOW: Both values are turned into unit lists, lengths compared first, then
units compared pairwise after folding ASCII A-Z to a-z.

RULES:
- Only ASCII letters are folded; no locale or Unicode case mapping
- Values must share a representation (str with str, bytes with bytes,
  UTF16String with UTF16String, ...); None matches any and is empty
- The full value is compared, embedded zero units included
"""

from __future__ import annotations

from typing import Any, List, Optional

from text_converter.core.representations import CodeUnitString


def _fold(unit: int) -> int:
    if 0x41 <= unit <= 0x5A:
        return unit + 0x20
    return unit


def _kind(value: Any) -> Optional[type]:
    if value is None:
        return None
    if isinstance(value, str):
        return str
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes
    if isinstance(value, CodeUnitString):
        return type(value)
    raise TypeError("Cannot compare values of type {}".format(type(value).__name__))


def _units(value: Any) -> List[int]:
    if value is None:
        return []
    if isinstance(value, str):
        return [ord(char) for char in value]
    if isinstance(value, (bytes, bytearray, memoryview)):
        return list(bytes(value))
    return list(value)


def are_equal_ignore_case(first: Any, second: Any) -> bool:
    """Compare two strings of the same representation ignoring ASCII case.

    Raises:
        TypeError: If the values are of different representations.
    """
    first_kind = _kind(first)
    second_kind = _kind(second)
    if first_kind is not None and second_kind is not None and first_kind is not second_kind:
        raise TypeError(
            "Cannot compare {} with {}".format(first_kind.__name__, second_kind.__name__)
        )

    first_units = _units(first)
    second_units = _units(second)
    if len(first_units) != len(second_units):
        return False
    return all(_fold(a) == _fold(b) for a, b in zip(first_units, second_units))
