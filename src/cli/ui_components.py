"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the interactive loop and the one-shot command share panels/tables.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.base import Base
from core.domain.models import Conversion
from core.services.session import HELP_MESSAGE


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Skipped with `--no-banner` or `BASECONV_SHOW_BANNER=false`.
    """

    title = Text("Base Converter", style="bold cyan")
    subtitle = Text("hex • dec • bin   |   :h for help, :q to quit", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_help_panel() -> Panel:
    """Panel with the list of `:`-commands."""

    return Panel(Text(HELP_MESSAGE.rstrip()), title="Base Converter", border_style="yellow")


def build_bases_table(conversion: Conversion) -> Table:
    """One row per base with the converted value."""

    table = Table(title=f"{conversion.source} ({conversion.input_base.label()})")
    table.add_column("Base", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for base in Base:
        table.add_row(base.label(), conversion.in_base(base))
    return table


def print_error(console: Console, message: str) -> None:
    console.print(Text(f"Error: {message}", style="red"))
