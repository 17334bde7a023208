"""Subcommands that raise one usage failure each.

Shell scripts call these to print the same one-line diagnostics (and exit
with the same status) as programs built on this library.
"""
from __future__ import annotations
import logging
from argparse import ArgumentParser, _SubParsersAction
from . import register
from ..cli import effective_prog_name
from ..errors import (
    InvalidArgumentError,
    MissingValueError,
    OptionMissingRequiredArgumentError,
    UnrecognizedOptionError,
)

logger = logging.getLogger("optionparser.report")


def _unrecognized_option(args) -> int:
    raise UnrecognizedOptionError(effective_prog_name(args), args.option_name)


def _missing_value(args) -> int:
    raise MissingValueError(effective_prog_name(args), args.value_name)


def _invalid_argument(args) -> int:
    logger.debug("Reporting invalid value for %s", args.arg_name)
    raise InvalidArgumentError(effective_prog_name(args), args.arg_name, args.arg_value)


def _missing_argument(args) -> int:
    raise OptionMissingRequiredArgumentError(effective_prog_name(args), args.opt_name)


@register
def register_report(subparsers: _SubParsersAction) -> None:
    p: ArgumentParser = subparsers.add_parser(
        "unrecognized-option",
        help="Report an unrecognized option.",
    )
    p.add_argument("option_name", metavar="NAME", help="The option that was not recognized.")
    p.set_defaults(func=_unrecognized_option)

    p = subparsers.add_parser(
        "missing-value",
        help="Report a value that was never supplied.",
    )
    p.add_argument("value_name", metavar="NAME", help="Name of the missing value.")
    p.set_defaults(func=_missing_value)

    p = subparsers.add_parser(
        "invalid-argument",
        help="Report an argument with an invalid value.",
    )
    p.add_argument("arg_name", metavar="NAME", help="Name of the argument.")
    p.add_argument("arg_value", metavar="VALUE", help="The rejected value (escaped on output).")
    p.set_defaults(func=_invalid_argument)

    p = subparsers.add_parser(
        "missing-argument",
        help="Report an option given without its required argument.",
    )
    p.add_argument("opt_name", metavar="OPTION", help="The option missing its argument.")
    p.set_defaults(func=_missing_argument)
