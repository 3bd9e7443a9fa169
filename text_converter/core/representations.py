"""Typed containers for UTF-16, UTF-32 and wide character strings.

WHY: Python has one text type, but the conversion matrix needs to know
whether a run of integers is UTF-16, UTF-32 or platform wide characters.
Distinct immutable types make the source encoding explicit, the same way
``bytes`` marks UTF-8 and ``str`` marks narrow strings.

HOW: CodeUnitString is a frozen dataclass holding a tuple of integer code
units, validated against the unit width of the concrete subclass. Each
subclass names the codec its units are in, which powers the from_text()
and to_text() helpers.

RULES:
- Units are stored without a terminator
- Every unit must fit in ``unit_bits`` bits, otherwise ValueError
- Two values are equal only if they have the same type and the same units
- WString takes its unit width and codec from the process-wide WIDE
  dispatch
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Tuple

from text_converter.core.codecs import UTF16, UTF32
from text_converter.core.drivers import iter_code_points
from text_converter.core.width import WIDE


@dataclass(frozen=True)
class CodeUnitString:
    """An immutable sequence of integer code units.

    Not used directly. Instantiate UTF16String, UTF32String or WString.
    """

    units: Tuple[int, ...] = ()

    unit_bits = 32
    codec = UTF32

    def __post_init__(self) -> None:
        units = tuple(self.units)
        limit = 1 << self.unit_bits
        for index, unit in enumerate(units):
            if not isinstance(unit, int) or not 0 <= unit < limit:
                raise ValueError(
                    "{} unit {} at index {} does not fit in {} bits".format(
                        type(self).__name__, unit, index, self.unit_bits
                    )
                )
        object.__setattr__(self, "units", units)

    @classmethod
    def from_text(cls, text: str) -> CodeUnitString:
        """Encode a Python str into this representation."""
        units = []
        for char in text:
            units.extend(cls.codec.encode(ord(char)))
        return cls(tuple(units))

    @classmethod
    def from_units(cls, units: Iterable[int]) -> CodeUnitString:
        return cls(tuple(units))

    def to_text(self) -> str:
        """Decode the units into a Python str (lone surrogates kept as-is)."""
        return "".join(chr(cp) for cp in iter_code_points(self.units, self.codec))

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[int]:
        return iter(self.units)

    def __getitem__(self, index: int) -> int:
        return self.units[index]


class UTF16String(CodeUnitString):
    """UTF-16 code units; code points above U+FFFF use surrogate pairs."""

    unit_bits = 16
    codec = UTF16


class UTF32String(CodeUnitString):
    """UTF-32 code units, one per code point."""

    unit_bits = 32
    codec = UTF32


class WString(CodeUnitString):
    """Platform wide characters: UTF-16 or UTF-32 depending on WCHAR_WIDTH."""

    unit_bits = WIDE.unit_bits
    codec = WIDE.codec
