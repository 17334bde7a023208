from __future__ import annotations

from .errors import (
    EXIT_OK,
    EXIT_USAGE,
    InvalidArgumentError,
    MissingValueError,
    OptionMissingRequiredArgumentError,
    SystemExitError,
    UnrecognizedOptionError,
)
from .escaping import escape_string
from .runner import exits_on_failure, run_main

# Resolve package version from installed metadata when available.
# Falls back to a dev/local version when running from source.
try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("optionparser")
except PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "EXIT_OK",
    "EXIT_USAGE",
    "InvalidArgumentError",
    "MissingValueError",
    "OptionMissingRequiredArgumentError",
    "SystemExitError",
    "UnrecognizedOptionError",
    "escape_string",
    "exits_on_failure",
    "run_main",
]
