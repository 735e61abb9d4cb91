"""Line-oriented substring search over in-memory text.

Both matchers share one contract: lines are numbered from 1 in document order,
a line is kept when it contains the pattern, and the result is a fully built list.
An empty pattern matches every line.
"""

from collections.abc import Iterator
from typing import NamedTuple


class Match(NamedTuple):
    """A matching line and its 1-based position in the searched text."""

    line_number: int
    line: str


def iter_lines(contents: str) -> Iterator[str]:
    """Yield the lines of ``contents``.

    Lines end at ``\\n``; a ``\\r`` right before it is dropped. A trailing newline
    does not produce an extra empty line, and empty text has no lines at all.
    """
    if not contents:
        return
    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part.removesuffix("\r")


def search(pattern: str, contents: str) -> list[Match]:
    """Return the lines of ``contents`` containing ``pattern``, case-sensitive."""
    return [Match(number, line) for number, line in enumerate(iter_lines(contents), start=1) if pattern in line]


def search_case_insensitive(pattern: str, contents: str) -> list[Match]:
    """Return the lines of ``contents`` containing ``pattern``, ignoring case.

    Both sides are lowercased with ``str.lower`` (full Unicode mapping), so
    ``"ÄRGER"`` finds ``"ärger"`` as well as ``"Ärger"``.
    """
    needle = pattern.lower()
    return [Match(number, line) for number, line in enumerate(iter_lines(contents), start=1) if needle in line.lower()]
