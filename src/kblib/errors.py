"""Error types and user-facing error messages for the keybind helper."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ConfigError(RuntimeError):
    pass


class UnrecognizedArgument(ConfigError):
    """A command-line argument other than ``--config PATH`` was given."""


class ConfigLoadError(ConfigError):
    """The configuration file could not be turned into a Config."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class FileReadError(ConfigLoadError):
    pass


class ParseError(ConfigLoadError):
    pass


def format_argument_error(error: Exception) -> str:
    """Format a command-line parsing error."""
    return (
        f"Error parsing flags: {error}\n"
        "Usage: kbctl [--config PATH]"
    )


def format_config_error(error: Exception) -> str:
    """Format configuration-related error messages."""
    if isinstance(error, UnrecognizedArgument):
        return format_argument_error(error)

    path = getattr(error, "path", None) or "<unknown>"
    message = f"Error loading config from {path}: {error}"

    if isinstance(error, FileReadError):
        return (
            f"{message}\n"
            "Check the --config flag or the NVIM_HELPER_CONFIG environment variable."
        )

    if isinstance(error, ParseError):
        return (
            f"{message}\n"
            "Expected an object with optional 'columns', 'rows' and 'height' keys."
        )

    return message
