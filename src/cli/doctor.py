"""Doctor command: shows the effective configuration."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics.")

_console = Console()


@app.command()
def run() -> None:
    """Load the settings and print the values a new session would use."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print("[red]Invalid configuration:[/red]")
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            _console.print(f"  BASECONV_{location.upper()}: {error['msg']}", markup=False)
        raise typer.Exit(code=1)

    table = Table(title="baseconv doctor")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Variable", style="dim")

    table.add_row("Input base", settings.default_input_base.label(), "BASECONV_DEFAULT_INPUT_BASE")
    table.add_row("Output base", settings.default_output_base.label(), "BASECONV_DEFAULT_OUTPUT_BASE")
    table.add_row("Banner", "on" if settings.show_banner else "off", "BASECONV_SHOW_BANNER")
    table.add_row("Log level", settings.log_level, "BASECONV_LOG_LEVEL")

    _console.print(table)
