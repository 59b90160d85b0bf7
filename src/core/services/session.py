"""Interactive session state and command dispatch.

The session owns the current input and output bases, interprets `:`-commands
and converts numerals. It performs no I/O: the driver loop decides how to
read lines and where to print prompts, results and errors. The only side
effect, the help display, is delegated to the `on_help` callback.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from core.domain.base import Base
from core.domain.errors import CommandFormatError
from core.domain.models import Conversion

logger = logging.getLogger(__name__)

COMMAND_SENTINEL = ":"
HELP_KEYWORDS = ("h", "help")
QUIT_KEYWORDS = ("q", "quit")

# ASCII whitespace only: space, \t, \n, \f, \r
_TOKEN_SEPARATOR = re.compile(r"[ \t\n\x0c\r]+")

HELP_MESSAGE = """\
Usage:
    :from <base> to <base>      change input base and output base
    :from <base>                change input base
    :to <base>                  change output base
<base> can be "hex", "dec", "bin"
    :h or :help                 print help message
    :q or :quit                 stop program
"""


def _no_help() -> None:
    return None


@dataclass
class Session:
    """Current base selection of one converter session.

    Defaults to hex in, binary out.
    """

    input_base: Base = field(default_factory=Base.default_input)
    output_base: Base = field(default_factory=Base.default_output)
    on_help: Callable[[], None] = field(default=_no_help, repr=False, compare=False)

    def prompt_label(self) -> str:
        """Display name of the input base, shown in the prompt."""

        return self.input_base.label()

    def output_label(self) -> str:
        """Display name of the output base, shown before each result."""

        return self.output_base.label()

    def prompt(self) -> str:
        """Prompt shown before reading a line, e.g. `<hex>$ `."""

        return f"<{self.prompt_label()}>$ "

    def echo(self, result: str) -> str:
        """Output line for a converted value, e.g. `<bin> 1111_1111`."""

        return f"<{self.output_label()}> {result}"

    @staticmethod
    def is_command(line: str) -> bool:
        return line.startswith(COMMAND_SENTINEL)

    @staticmethod
    def is_quit(line: str) -> bool:
        """True for `:q` / `:quit`; handled by the driver, not by `execute_command`."""

        line = line.strip()
        return any(line == f"{COMMAND_SENTINEL}{kw}" for kw in QUIT_KEYWORDS)

    def execute_command(self, line: str) -> None:
        """Apply a `:`-command.

        Accepted shapes:
        - `:h` / `:help`
        - `:from <base>` or `:to <base>`
        - `:from <base> to <base>` (any two selector/base pairs, applied in order)

        When a two-pair command fails on the second pair, the first pair stays
        applied.

        Raises `CommandFormatError` or `UnknownBaseError`.
        """

        if not self.is_command(line):
            raise CommandFormatError(line)

        body = line[len(COMMAND_SENTINEL):].strip()
        if body in HELP_KEYWORDS:
            self.on_help()
            return

        words = [word for word in _TOKEN_SEPARATOR.split(body) if word]
        if len(words) not in (2, 4):
            raise CommandFormatError(line)

        self.change_base(words[0], words[1])
        if len(words) == 4:
            self.change_base(words[2], words[3])

    def change_base(self, selector: str, name: str) -> None:
        """Set the input (`from`) or output (`to`) base by name."""

        if selector == "from":
            self.input_base = Base.from_name(name)
            logger.debug("input base set to %s", self.input_base.label())
        elif selector == "to":
            self.output_base = Base.from_name(name)
            logger.debug("output base set to %s", self.output_base.label())
        else:
            raise CommandFormatError(f"{selector} {name}")

    def convert_detailed(self, text: str) -> Conversion:
        """Parse `text` with the input base and format it with the output base."""

        value = self.input_base.parse(text)
        conversion = Conversion(
            source=text,
            input_base=self.input_base,
            output_base=self.output_base,
            value=value,
            output=self.output_base.format_value(value),
        )
        logger.debug(
            "converted %r (%s) -> %r (%s)",
            text,
            self.input_base.label(),
            conversion.output,
            self.output_base.label(),
        )
        return conversion

    def convert(self, text: str) -> str:
        """Converted text; raises `NumeralParseError` when `text` is not a numeral."""

        return self.convert_detailed(text).output
