from __future__ import annotations

import sys
from typing import Callable, NoReturn, Optional, TextIO

from .escaping import escape_string

EXIT_OK = 0
EXIT_USAGE = 2         # bad CLI usage, missing args, etc.
EXIT_INTERRUPTED = 130


class SystemExitError(Exception):
    """
    An error that wants the process to terminate with a specific status code
    after printing a one-line diagnostic to stderr.

    Args:
        prog_name: Name of the invoking program, used to prefix the diagnostic.
        message: Short, user-friendly message.
        exit_code: Process exit code to use when this error reaches run_main.
    """

    def __init__(self, prog_name: str, message: str, exit_code: int):
        super().__init__(message)
        self._prog_name = prog_name
        self._message = message
        self._exit_code = int(exit_code)

    @property
    def prog_name(self) -> str:
        return self._prog_name

    @property
    def message(self) -> str:
        return self._message

    @property
    def exit_code(self) -> int:
        return self._exit_code

    def format(self) -> str:
        return f"{self._prog_name}: {self._message}"

    def print_and_exit(
        self,
        stream: Optional[TextIO] = None,
        exit: Optional[Callable[[int], object]] = None,
    ) -> NoReturn:
        # sys.stderr is resolved per call; redirect_stderr() may have swapped it.
        print(self.format(), file=stream if stream is not None else sys.stderr)
        (exit or sys.exit)(self._exit_code)  # type: ignore[misc]


class UnrecognizedOptionError(SystemExitError):
    """An unrecognized option was supplied."""

    def __init__(self, prog_name: str, option_name: str):
        self._option_name = option_name
        super().__init__(prog_name, f"unrecognized option '{option_name}'", EXIT_USAGE)

    @property
    def option_name(self) -> str:
        return self._option_name


class MissingValueError(SystemExitError):
    """A value is still missing after parsing has completed."""

    def __init__(self, prog_name: str, value_name: str):
        self._value_name = value_name
        super().__init__(prog_name, f"missing {value_name}", EXIT_USAGE)

    @property
    def value_name(self) -> str:
        return self._value_name


class InvalidArgumentError(SystemExitError):
    """
    The value of a supplied argument is invalid.

    The offending value is escaped before it is embedded, so quotes and
    control characters in user input cannot break the diagnostic line.
    """

    def __init__(self, prog_name: str, arg_name: str, arg_value: str):
        self._arg_name = arg_name
        self._arg_value = arg_value
        super().__init__(
            prog_name,
            f"invalid {arg_name}: '{escape_string(arg_value)}'",
            EXIT_USAGE,
        )

    @property
    def arg_name(self) -> str:
        return self._arg_name

    @property
    def arg_value(self) -> str:
        return self._arg_value


class OptionMissingRequiredArgumentError(SystemExitError):
    """An option that takes an argument was given without one."""

    def __init__(self, prog_name: str, opt_name: str):
        self._opt_name = opt_name
        super().__init__(
            prog_name,
            f"option '{opt_name}' is missing a required argument",
            EXIT_USAGE,
        )

    @property
    def opt_name(self) -> str:
        return self._opt_name
