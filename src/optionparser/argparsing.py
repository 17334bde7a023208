"""argparse front end that raises parsing failures instead of exiting.

argparse reports every usage problem through `ArgumentParser.error()`, which
prints usage and calls `sys.exit(2)`. The `ArgumentParser` here overrides that
hook and raises the matching SystemExitError, so the caller's run_main is the
one place where the process is terminated.
"""

from __future__ import annotations

import argparse
import ast
import logging
import re
from typing import NoReturn

from .errors import (
    EXIT_USAGE,
    InvalidArgumentError,
    MissingValueError,
    OptionMissingRequiredArgumentError,
    SystemExitError,
    UnrecognizedOptionError,
)

logger = logging.getLogger("optionparser.argparsing")

_UNRECOGNIZED = re.compile(r"^unrecognized arguments: (?P<args>.+)$", re.DOTALL)
_REQUIRED = re.compile(r"^the following arguments are required: (?P<names>.+)$", re.DOTALL)
_INVALID = re.compile(
    r"^argument (?P<name>.+?): invalid (?:.+? value|choice): "
    r"(?P<value>'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\")",
    re.DOTALL,
)
_EXPECTED = re.compile(
    r"^argument (?P<name>.+?): expected (?:one argument|at least one argument|\d+ arguments)$"
)


def _decode_repr(literal: str) -> str:
    # argparse embeds the offending value with %r.
    try:
        value = ast.literal_eval(literal)
    except (ValueError, SyntaxError):
        return literal[1:-1]
    return value if isinstance(value, str) else str(value)


def failure_from_message(prog_name: str, message: str) -> SystemExitError:
    """Map an argparse error message onto the most specific failure."""
    m = _UNRECOGNIZED.match(message)
    if m:
        extras = m.group("args").split()
        return UnrecognizedOptionError(prog_name, extras[0] if extras else m.group("args"))

    m = _REQUIRED.match(message)
    if m:
        return MissingValueError(prog_name, m.group("names").split(", ")[0])

    m = _INVALID.match(message)
    if m:
        return InvalidArgumentError(prog_name, m.group("name"), _decode_repr(m.group("value")))

    m = _EXPECTED.match(message)
    if m:
        return OptionMissingRequiredArgumentError(prog_name, m.group("name"))

    logger.debug("No specific failure for argparse message %r", message)
    return SystemExitError(prog_name, message, EXIT_USAGE)


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors raise SystemExitError.

    Sub-parsers created through add_subparsers() use this class too.
    `--help` and `--version` still exit 0 the normal argparse way.
    """

    def error(self, message: str) -> NoReturn:
        raise failure_from_message(self.prog, message)

    def parse_args(self, args=None, namespace=None):
        # Leftovers are reported from the list itself; argparse's joined
        # message loses blank and space-containing arguments.
        namespace, extras = self.parse_known_args(args, namespace)
        if extras:
            raise UnrecognizedOptionError(self.prog, extras[0])
        return namespace
