"""Small helpers shared by the CLI layer."""

import sys
from typing import NoReturn

import typer


def fatal(message: str, code: int = 1) -> NoReturn:
    """Print a message to stderr and exit with the given code."""
    print(message, file=sys.stderr)  # noqa: T201 -- diagnostics go to stderr
    raise typer.Exit(code)
