"""Generic conversion algorithms shared by every public converter.

WHY: The conversion matrix has thirty-odd entry points but only three
distinct algorithms: widen (or truncate) unit by unit, transcode through
code points, and null-terminate byte buffers. Writing each algorithm once
keeps the entry points to a line or two.

HOW: The readers normalise caller input into a plain list of integer units,
stopping at the first zero unit the way a C string would. The drivers then
operate on those lists and return new lists (or bytes); callers wrap the
result in the destination type.

RULES:
- Readers treat None as an empty source
- Readers stop at the first zero unit (the terminator is not included)
- read_narrow rejects characters that do not fit in one narrow unit
- straight_widen never raises; narrowing keeps only the low-order bits
- transcode aborts on the first EncodingError, there is no partial output
- null_terminate adds at most one zero byte and never to an empty buffer
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import List, Optional, Tuple, Union

from text_converter.core.codecs import Codec
from text_converter.core.errors import EncodingError

BytesLike = Union[bytes, bytearray, memoryview]

NARROW_UNIT_BITS = 8


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------


def read_units(value: Optional[Iterable[int]]) -> List[int]:
    """Code units of ``value`` up to (not including) the first zero unit.

    Accepts any iterable of ints, which covers the code unit string types.
    """
    units = []  # type: List[int]
    if value is None:
        return units
    for unit in value:
        if unit == 0:
            break
        units.append(unit)
    return units


def read_bytes(value: Optional[BytesLike]) -> List[int]:
    """Bytes of a bytes-like ``value`` up to the first zero byte."""
    if value is None:
        return []
    data = bytes(value)
    end = data.find(0)
    if end != -1:
        data = data[:end]
    return list(data)


def read_narrow(value: Optional[str]) -> List[int]:
    """Narrow units of ``value`` up to the first NUL character.

    WHY: A Python str stands in for a narrow ``char`` string. Each
    character is one narrow unit.

    HOW: Takes ``ord(c)`` for each character, stopping at ``"\\0"``.

    RULES:
    - A character above U+00FF is not a narrow unit and raises EncodingError
      with the index of that character
    - Characters after the first NUL are not inspected

    Raises:
        EncodingError: If a character does not fit in a narrow unit.
    """
    if value is None:
        return []
    limit = 1 << NARROW_UNIT_BITS
    units = []  # type: List[int]
    for index, char in enumerate(value):
        unit = ord(char)
        if unit == 0:
            break
        if unit >= limit:
            raise EncodingError(
                "narrow", "U+{:04X} does not fit in a narrow unit".format(unit), index
            )
        units.append(unit)
    return units


# ---------------------------------------------------------------------------
# Drivers
# ---------------------------------------------------------------------------


def copy_units(units: Sequence[int]) -> List[int]:
    return list(units)


def straight_widen(units: Iterable[int], unit_bits: int) -> List[int]:
    """Copy each unit into a destination unit of ``unit_bits`` bits.

    WHY: Fixed-width narrow data is a numeric subset of UTF-16, UTF-32 and
    wide characters, so widening is a plain copy. The same copy in the
    other direction is the known lossy narrowing used when producing narrow
    strings.

    HOW: Masks every unit with ``(1 << unit_bits) - 1``. Units are already
    non-negative, so widening is zero-extension.

    RULES:
    - Never raises, even when high-order bits are dropped
    - Callers needing a checked narrowing must verify the result themselves
    """
    mask = (1 << unit_bits) - 1
    return [unit & mask for unit in units]


def iter_decoded(units: Sequence[int], codec: Codec) -> Iterator[Tuple[int, int]]:
    """Yield ``(offset, code_point)`` pairs, offset being the first unit index."""
    pos = 0
    while pos < len(units):
        code_point, consumed = codec.decode(units, pos)
        yield pos, code_point
        pos += consumed


def iter_code_points(units: Sequence[int], codec: Codec) -> Iterator[int]:
    """Yield the code points of ``units`` decoded with ``codec``."""
    for _, code_point in iter_decoded(units, codec):
        yield code_point


def transcode(units: Sequence[int], source: Codec, destination: Codec) -> List[int]:
    """Decode ``units`` with ``source`` and re-encode with ``destination``.

    WHY: Every conversion between the UTF encodings (wide characters
    included) that is not a plain widening has to go through code points,
    since unit boundaries do not line up between encodings.

    HOW: Walks the source with iter_code_points and extends the result with
    the destination encoding of each code point.

    RULES:
    - A decode or encode failure raises EncodingError out of the call
    - The result is a new list; ``units`` is not modified

    Args:
        units: Source code units, already stripped of any terminator.
        source: Codec the units are encoded in.
        destination: Codec to produce.

    Returns:
        Destination code units.
    """
    result = []  # type: List[int]
    for code_point in iter_code_points(units, source):
        result.extend(destination.encode(code_point))
    return result


def null_terminate(buffer: Iterable[int]) -> bytes:
    """Return ``buffer`` as bytes ending in exactly one zero if non-empty."""
    data = bytearray(buffer)
    if data and data[-1] != 0:
        data.append(0)
    return bytes(data)
