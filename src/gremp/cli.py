"""Command-line entry point: ``gremp PATTERN FILENAME``."""

import importlib.metadata
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import CASE_INSENSITIVE_ENV, SearchConfig
from .output import print_plain
from .runner import run
from .utils import fatal

PACKAGE_NAME = "gremp"


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback that prints ``{package_name}: {version}``."""

    def version_callback(value: bool) -> None:
        """Print the version and exit when --version is passed."""
        if value:
            print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


def configure_logging(*, debug: bool) -> None:
    """Send gremp debug logs to stderr through Rich when ``debug`` is set."""
    if not debug:
        return
    package_logger = logging.getLogger(PACKAGE_NAME)
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


@app.command()
def main(
    pattern: Annotated[str | None, typer.Argument(help="Text to search for (plain substring).", show_default=False)] = None,
    filename: Annotated[Path | None, typer.Argument(help="File to search.", show_default=False)] = None,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", "-i", help=f"Ignore case even if {CASE_INSENSITIVE_ENV} is not set."),
    ] = False,
    case_sensitive: Annotated[
        bool,
        typer.Option("--case-sensitive", "-s", help=f"Match case even if {CASE_INSENSITIVE_ENV} is set."),
    ] = False,
    print_config: Annotated[bool, typer.Option("--print-config", help="Print the resolved configuration and exit.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log debug details to stderr.")] = False,
    _version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=create_version_callback(PACKAGE_NAME), is_eager=True, help="Show version and exit."),
    ] = None,
) -> None:
    """Print each line of FILENAME containing PATTERN, prefixed by its line number."""
    configure_logging(debug=debug)
    if ignore_case and case_sensitive:
        fatal("problem parsing arguments: --ignore-case and --case-sensitive are mutually exclusive")
    # None defers to the environment
    override = True if ignore_case else False if case_sensitive else None
    config = SearchConfig.from_args_or_exit(pattern, filename, ignore_case=override, environ=os.environ)
    if print_config:
        config.print_and_exit()

    result = run(config)
    if result.is_err():
        message = result.context["message"] if result.context else result.error
        fatal(f"encountered an error: {message}")


if __name__ == "__main__":
    app()
