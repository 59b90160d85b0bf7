"""Run script.

Why it exists:
- Runs the CLI with `python -m main` during development.
- Keeps a simple entry point next to the `baseconv` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
