from __future__ import annotations
import json
from argparse import ArgumentParser, _SubParsersAction
from . import register
from ..config import load_config

_KEYS = ("prog_name", "log_level")


def _run_show(args) -> int:
    cfg = getattr(args, "_optionparser_config", None)
    sources = getattr(args, "_optionparser_sources", None)
    if cfg is None or sources is None:
        cfg, sources = load_config(getattr(args, "config", None))

    values = {key: getattr(cfg, key) for key in _KEYS}
    with_sources = getattr(args, "with_sources", False)

    if getattr(args, "format", "text") == "json":
        payload = {"ok": True, "command": "config.show", **values}  # unset keys are null
        if with_sources:
            payload["sources"] = {key: sources.get(key, "default") for key in _KEYS}
        print(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))
        return 0

    for key in _KEYS:
        line = f"{key}: {values[key] or ''}"
        if with_sources:
            line += f" (source={sources.get(key, 'default')})"
        print(line)
    return 0


@register
def register_config(subparsers: _SubParsersAction) -> None:
    p: ArgumentParser = subparsers.add_parser(
        "config",
        help="Show where the program name and log level come from.",
        description="Show optionparser configuration merged from defaults, TOML files, and environment.",
    )
    sp = p.add_subparsers(dest="config_cmd", metavar="<subcommand>")
    show = sp.add_parser("show", help="Print the effective configuration.")
    show.add_argument("--with-sources", action="store_true", help="Also print which layer set each value.")
    show.add_argument("--format", choices=["text", "json"], default="text")
    show.set_defaults(func=_run_show)
