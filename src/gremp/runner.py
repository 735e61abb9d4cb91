"""End-to-end search: read the file, pick a matcher, emit numbered lines."""

import logging
import sys
from typing import TextIO

from mm_result import Result

from .config import SearchConfig
from .errors import SearchIOError
from .output import print_plain
from .search import search, search_case_insensitive

logger = logging.getLogger(__name__)


def format_match(line_number: int, line: str) -> str:
    """Render one output record, e.g. ``"2. Safe, fast, productive."``."""
    return f"{line_number}. {line}"


def run(config: SearchConfig, out: TextIO | None = None) -> Result[int]:
    """Search ``config.filename`` and write every matching line to ``out``.

    Returns the number of matches. The whole file is read before anything is
    written, so a read failure produces no output.

    Args:
        config: Resolved search configuration.
        out: Destination for result records. Defaults to ``sys.stdout``.

    """
    try:
        # bytes first: text mode would split lines on a lone "\r"
        contents = config.filename.read_bytes().decode("utf-8")
    except (OSError, ValueError) as e:
        return _io_error(f"can't read {config.filename}: {e}", e)

    matcher = search if config.case_sensitive else search_case_insensitive
    matches = matcher(config.pattern, contents)
    logger.debug("%s found %d match(es) in %s", matcher.__name__, len(matches), config.filename)

    sink = out if out is not None else sys.stdout
    try:
        for line_number, line in matches:
            print_plain(format_match(line_number, line), file=sink)
        sink.flush()
    except (OSError, ValueError) as e:
        return _io_error(f"can't write results: {e}", e)

    return Result.ok(len(matches))


def _io_error(message: str, cause: Exception) -> Result[int]:
    error = SearchIOError(message)
    error.__cause__ = cause
    return Result.err(("io_error", error), context={"message": message})
