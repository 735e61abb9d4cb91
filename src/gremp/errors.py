"""Error types raised or carried by gremp operations."""


class GrempError(Exception):
    """Base class for gremp errors."""


class ConfigError(GrempError):
    """Command-line arguments could not be resolved into a search configuration."""

    def __init__(self, reason: str) -> None:
        """Store the user-facing reason, e.g. ``"missing filename"``."""
        super().__init__(reason)
        self.reason = reason


class SearchIOError(GrempError):
    """Reading the target file or writing results failed."""
