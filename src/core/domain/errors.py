"""Error hierarchy of the converter.

Two families, both recoverable:
- `NumeralParseError`: the text is not a valid numeral for the selected base.
- `CommandError`: a `:`-command could not be applied.

The interactive loop prints them and keeps going.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.domain.base import Base


class BaseConvError(Exception):
    """Root of every error raised by the converter core."""


class ParseErrorKind(str, Enum):
    """Why a numeral was rejected."""

    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    OVERFLOW = "overflow"


class NumeralParseError(BaseConvError):
    """A numeral could not be read in the selected base."""

    def __init__(self, kind: ParseErrorKind, text: str, base: "Base") -> None:
        self.kind = kind
        self.text = text
        self.base = base
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind is ParseErrorKind.EMPTY:
            return f"cannot parse {self.base.label()} number from empty string"
        if self.kind is ParseErrorKind.OVERFLOW:
            return f"{self.text!r} is too large to fit in 64 bits"
        return f"invalid digit found in {self.text!r} for base {self.base.label()}"


class CommandError(BaseConvError):
    """A command line could not be applied to the session."""


class CommandFormatError(CommandError):
    """Wrong token count, missing sentinel or unknown selector keyword."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__("wrong command format")


class UnknownBaseError(CommandError):
    """The base name is not one of `hex`, `dec`, `bin`."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"no base named {name!r} (expected hex, dec or bin)")
