from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from . import __version__
from .argparsing import ArgumentParser
from .commands import get_registry, autodiscover
from .config import ENV_LOG_LEVEL, load_config
from .errors import EXIT_USAGE, EXIT_INTERRUPTED

DEFAULT_PROG = "optionparser"


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=DEFAULT_PROG,
        description="Report command-line usage errors the way optionparser programs do.",
    )

    # Global/root flags
    parser.add_argument(
        "--prog",
        default=None,
        help="Program name used to prefix diagnostics (default from env/config).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Override log level (default from env/config).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a TOML config file to use (highest precedence).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"optionparser {__version__}",
        help="Show version and exit.",
    )

    subparsers = parser.add_subparsers(
        title="subcommands",
        dest="subcommand",
        metavar="<command>",
        required=False,
    )
    # Import all subcommand modules so they @register
    autodiscover()

    for registrar in get_registry():
        registrar(subparsers)

    return parser


def _configure_logging(cli_level_name: Optional[str], cfg_level_name: Optional[str]) -> None:
    # Precedence: CLI > ENV > CONFIG > default(WARNING)
    level_name = (
        (cli_level_name or "").strip()
        or (os.getenv(ENV_LOG_LEVEL) or "").strip()
        or (cfg_level_name or "").strip()
        or "WARNING"
    )
    level = getattr(logging, level_name.upper(), logging.WARNING)

    # force=True so repeated in-process runs reconfigure handlers
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def effective_prog_name(args) -> str:
    # Precedence: CLI --prog > ENV/config (already merged by load_config) > default
    if getattr(args, "prog", None):
        return args.prog
    cfg = getattr(args, "_optionparser_config", None)
    if cfg and getattr(cfg, "prog_name", None):
        return cfg.prog_name
    return DEFAULT_PROG


def run_cli(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load effective config once, attach to args so subcommands can use it
    cfg, sources = load_config(args.config)
    setattr(args, "_optionparser_config", cfg)
    setattr(args, "_optionparser_sources", sources)

    _configure_logging(getattr(args, "log_level", None), cfg.log_level)

    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        logging.getLogger("optionparser.cli").error("Interrupted.")
        return EXIT_INTERRUPTED
