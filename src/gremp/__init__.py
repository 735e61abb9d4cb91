"""Print the lines of a file that contain a pattern, with their line numbers."""

from .config import SearchConfig as SearchConfig
from .errors import ConfigError as ConfigError
from .errors import GrempError as GrempError
from .errors import SearchIOError as SearchIOError
from .runner import format_match as format_match
from .runner import run as run
from .search import Match as Match
from .search import iter_lines as iter_lines
from .search import search as search
from .search import search_case_insensitive as search_case_insensitive
