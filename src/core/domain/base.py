"""Numeral bases supported by the converter.

`Base` is the single source of truth for parsing and formatting numerals.
Values are unsigned 64-bit integers: anything above `U64_MAX` is rejected at
parse time instead of wrapping around.
"""

from __future__ import annotations

from enum import Enum

from core.domain.errors import NumeralParseError, ParseErrorKind, UnknownBaseError

U64_MAX = 2**64 - 1

UNSIGNED_SUFFIX = "u"

_DIGITS = {
    "hex": frozenset("0123456789abcdef"),
    "dec": frozenset("0123456789"),
    "bin": frozenset("01"),
}

_RADIX = {"hex": 16, "dec": 10, "bin": 2}

# digit count of U64_MAX per base, without leading zeros
_MAX_DIGITS = {"hex": 16, "dec": 20, "bin": 64}


class Base(str, Enum):
    """Closed set of numeral bases: hexadecimal, decimal and binary."""

    HEX = "hex"
    DEC = "dec"
    BIN = "bin"

    @classmethod
    def default_input(cls) -> "Base":
        return cls.HEX

    @classmethod
    def default_output(cls) -> "Base":
        return cls.BIN

    @classmethod
    def from_name(cls, name: str) -> "Base":
        """Resolve an exact, lower-case base name (`hex`, `dec`, `bin`)."""

        for member in cls:
            if member.value == name:
                return member
        raise UnknownBaseError(name)

    @property
    def radix(self) -> int:
        return _RADIX[self.value]

    def label(self) -> str:
        """Short name shown in prompts and echoed output."""

        return self.value

    def parse(self, text: str) -> int:
        """Read `text` as a numeral of this base.

        Rules:
        - a trailing `u` (C unsigned suffix) is dropped for every base
        - hex: trimmed, case-insensitive, optional `0x` prefix
        - dec: digits only (no sign, no prefix, no surrounding spaces)
        - bin: trimmed, case-insensitive, `_` separators ignored, optional `0b`

        Raises `NumeralParseError` on empty input, foreign digits or overflow.
        """

        source = text
        if text.endswith(UNSIGNED_SUFFIX):
            text = text[: -len(UNSIGNED_SUFFIX)]

        if self is Base.HEX:
            digits = text.strip().lower()
            digits = digits.removeprefix("0x")
        elif self is Base.BIN:
            digits = text.strip().lower().replace("_", "")
            digits = digits.removeprefix("0b")
        else:
            digits = text

        if not digits:
            raise NumeralParseError(ParseErrorKind.EMPTY, source, self)
        allowed = _DIGITS[self.value]
        if any(ch not in allowed for ch in digits):
            raise NumeralParseError(ParseErrorKind.INVALID_DIGIT, source, self)

        digits = digits.lstrip("0") or "0"
        if len(digits) > _MAX_DIGITS[self.value]:
            raise NumeralParseError(ParseErrorKind.OVERFLOW, source, self)

        value = int(digits, self.radix)
        if value > U64_MAX:
            raise NumeralParseError(ParseErrorKind.OVERFLOW, source, self)
        return value

    def format_value(self, value: int) -> str:
        """Render `value` in this base.

        Binary output below 16 is printed as-is (`100`); from 16 upwards it is
        split in zero-padded nibbles joined by `_` (`0001_0000`).
        """

        if value < 0 or value > U64_MAX:
            raise ValueError(f"{value} is outside the unsigned 64-bit range")

        if self is Base.HEX:
            return f"0x{value:x}"
        if self is Base.DEC:
            return str(value)
        if value < 16:
            return f"{value:b}"

        nibbles: list[str] = []
        while value > 0:
            nibbles.append(f"{value & 0b1111:04b}")
            value >>= 4
        return "_".join(reversed(nibbles))
