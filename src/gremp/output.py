"""Output helpers: plain text records and syntax-highlighted TOML."""

# ruff: noqa: T201 -- output layer

from collections.abc import Mapping
from typing import Any, TextIO

import tomlkit
from rich.console import Console
from rich.syntax import Syntax


def print_plain(*messages: object, file: TextIO | None = None) -> None:
    """Print messages with builtin print: no Rich markup, no wrapping."""
    print(*messages, file=file)


def print_toml(data: Mapping[str, Any], *, line_numbers: bool = False, theme: str = "monokai") -> None:
    """Print a mapping as syntax-highlighted TOML."""
    text = tomlkit.dumps(data)
    Console().print(Syntax(text, "toml", theme=theme, line_numbers=line_numbers))
