"""Search configuration resolved once from arguments and environment."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import NoReturn, Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict

from .errors import ConfigError
from .output import print_toml
from .utils import fatal

logger = logging.getLogger(__name__)

# Presence of this variable, with any value, switches the default to case-insensitive matching
CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"


def case_sensitive_from_env(environ: Mapping[str, str]) -> bool:
    """Return False when ``CASE_INSENSITIVE`` is set, True otherwise."""
    return CASE_INSENSITIVE_ENV not in environ


class SearchConfig(BaseModel):
    """What to look for, where, and how to compare."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: str
    filename: Path
    case_sensitive: bool = True

    @classmethod
    def from_args(
        cls,
        pattern: str | None,
        filename: str | Path | None,
        *,
        ignore_case: bool | None = None,
        environ: Mapping[str, str],
    ) -> Result[Self]:
        """Build a config from positional values, an optional flag, and the environment.

        An explicit ``ignore_case`` wins over the environment. Nothing is read from disk here.
        """
        if pattern is None:
            return _config_error("missing pattern")
        if filename is None:
            return _config_error("missing filename")

        case_sensitive = case_sensitive_from_env(environ) if ignore_case is None else not ignore_case
        config = cls(pattern=pattern, filename=Path(filename), case_sensitive=case_sensitive)
        logger.debug("resolved config: %r", config)
        return Result.ok(config)

    @classmethod
    def from_argv(cls, argv: Sequence[str], environ: Mapping[str, str]) -> Result[Self]:
        """Build a config from a raw argument vector; ``argv[0]`` is the program name."""
        args = list(argv[1:])
        pattern = args[0] if len(args) > 0 else None
        filename = args[1] if len(args) > 1 else None
        return cls.from_args(pattern, filename, environ=environ)

    @classmethod
    def from_args_or_exit(
        cls,
        pattern: str | None,
        filename: str | Path | None,
        *,
        ignore_case: bool | None = None,
        environ: Mapping[str, str],
    ) -> Self:
        """Build a config. Print the reason to stderr and exit(1) on failure."""
        result = cls.from_args(pattern, filename, ignore_case=ignore_case, environ=environ)
        if result.is_ok():
            return result.unwrap()
        message = result.context["message"] if result.context else result.error
        fatal(f"problem parsing arguments: {message}")

    def print_and_exit(self) -> NoReturn:
        """Print config as formatted TOML and exit(0)."""
        print_toml(self.model_dump(mode="json"))
        raise SystemExit(0)


def _config_error(reason: str) -> Result[SearchConfig]:
    return Result.err(("config_error", ConfigError(reason)), context={"message": reason})
