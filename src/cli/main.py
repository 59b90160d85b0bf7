"""Command-line interface (Typer).

- `baseconv`: interactive loop (`<hex>$ ` prompt, `:`-commands).
- `baseconv convert VALUE`: one-shot conversion, text/JSON/table output.
- `baseconv doctor run`: effective configuration.
"""

from __future__ import annotations

from typing import Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import render_conversion_json
from cli import doctor
from cli.ui_components import build_bases_table, build_help_panel, print_banner, print_error
from core.config import AppSettings
from core.domain.base import Base
from core.domain.errors import BaseConvError
from core.logging_setup import configure_logging
from core.services.session import Session

app = typer.Typer(help="Convert numbers between hex, dec and bin.", add_completion=False)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _print_plain(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def new_session(
    settings: AppSettings,
    *,
    from_base: Base | None = None,
    to_base: Base | None = None,
    console: Console | None = None,
) -> Session:
    """Session with bases taken from the options, falling back to settings."""

    console = console or _console
    return Session(
        input_base=from_base or settings.default_input_base,
        output_base=to_base or settings.default_output_base,
        on_help=lambda: console.print(build_help_panel()),
    )


def run_interactive(
    session: Session,
    *,
    console: Console | None = None,
    read_line: Callable[[str], str] | None = None,
) -> None:
    """Read-convert-print loop until `:q`, `:quit`, EOF or Ctrl-C."""

    console = console or _console
    read_line = read_line or console.input

    while True:
        try:
            line = read_line(session.prompt()).strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

        if session.is_quit(line):
            return
        if not line:
            continue

        try:
            if session.is_command(line):
                session.execute_command(line)
            else:
                _print_plain(console, session.echo(session.convert(line)))
        except BaseConvError as exc:
            print_error(console, str(exc))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    from_base: Optional[Base] = typer.Option(None, "--from", "-f", help="Starting input base."),
    to_base: Optional[Base] = typer.Option(None, "--to", "-t", help="Starting output base."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Start the interactive converter when no sub-command is given."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        # doctor reports the details itself
        if ctx.invoked_subcommand == "doctor":
            return
        print_error(_err_console, f"invalid configuration ({exc.error_count()} errors), see `baseconv doctor run`")
        raise typer.Exit(code=1)

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is not None:
        return

    if settings.show_banner and not no_banner:
        print_banner(_console)
    run_interactive(new_session(settings, from_base=from_base, to_base=to_base))


@app.command()
def convert(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Numeral to convert, e.g. 0xff, 255, 1111_1111."),
    from_base: Optional[Base] = typer.Option(None, "--from", "-f", help="Input base."),
    to_base: Optional[Base] = typer.Option(None, "--to", "-t", help="Output base."),
    as_json: bool = typer.Option(False, "--json", help="Print the conversion as JSON."),
    all_bases: bool = typer.Option(False, "--all", help="Print the value in every base."),
) -> None:
    """Convert a single numeral and exit."""

    settings: AppSettings = ctx.obj or AppSettings()
    session = new_session(settings, from_base=from_base, to_base=to_base)

    try:
        conversion = session.convert_detailed(value.strip())
    except BaseConvError as exc:
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1)

    if as_json:
        _print_plain(_console, render_conversion_json(conversion))
    elif all_bases:
        _console.print(build_bases_table(conversion))
    else:
        _print_plain(_console, session.echo(conversion.output))


def run() -> None:
    app()
