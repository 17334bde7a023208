from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple, Optional, Any
import logging
import os

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

logger = logging.getLogger("optionparser.config")

ENV_PROG_NAME = "OPTIONPARSER_PROG_NAME"
ENV_LOG_LEVEL = "OPTIONPARSER_LOG_LEVEL"


@dataclass
class Config:
    prog_name: Optional[str] = None
    log_level: Optional[str] = None  # e.g., "INFO", "DEBUG"


def _read_toml(path: Path) -> Dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _find_prog_name(mapping: Dict[str, Any]) -> Optional[str]:
    """
    Search for a string 'prog_name' value at the top level first, then in
    nested tables (so both `prog_name = ...` and `[optionparser]` work).
    """
    val = mapping.get("prog_name")
    if isinstance(val, str):
        return val
    for v in mapping.values():
        if isinstance(v, dict):
            found = _find_prog_name(v)
            if isinstance(found, str):
                return found
    return None


def _apply_from_mapping(cfg: Config, sources: Dict[str, str], mapping: Dict[str, Any], label: str) -> None:
    name = _find_prog_name(mapping)
    if isinstance(name, str):
        cfg.prog_name = name
        sources["prog_name"] = label

    # log level either top-level "log_level" or table [logging].level
    if isinstance(mapping.get("log_level"), str):
        cfg.log_level = mapping["log_level"].upper()
        sources["log_level"] = label

    logging_tbl = mapping.get("logging")
    if isinstance(logging_tbl, dict):
        level = logging_tbl.get("level")
        if isinstance(level, str):
            cfg.log_level = level.upper()
            sources["log_level"] = label


def _apply_file(cfg: Config, sources: Dict[str, str], path: Path, label: str) -> None:
    try:
        mapping = _read_toml(path)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring config file %s: %s", path, e)
        return
    _apply_from_mapping(cfg, sources, mapping, label)


def _user_config_path() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "optionparser" / "config.toml"
    return Path.home() / ".config" / "optionparser" / "config.toml"


def _project_config_path() -> Path:
    return Path.cwd() / "optionparser.toml"


def load_config(override_path: Optional[str] = None) -> Tuple[Config, Dict[str, str]]:
    """
    Precedence:
    defaults < user < project < override file < env
    (CLI flags are handled in cli.py and beat all of these.)
    """
    cfg = Config()
    sources: Dict[str, str] = {"prog_name": "default", "log_level": "default"}

    u = _user_config_path()
    if u.exists():
        _apply_file(cfg, sources, u, "user")

    p = _project_config_path()
    if p.exists():
        _apply_file(cfg, sources, p, "project")

    if override_path:
        op = Path(override_path)
        if op.exists():
            _apply_file(cfg, sources, op, f"override:{op}")
        else:
            logger.warning("Config file %s does not exist", op)

    if ENV_PROG_NAME in os.environ:
        cfg.prog_name = os.environ[ENV_PROG_NAME]
        sources["prog_name"] = f"env:{ENV_PROG_NAME}"

    if ENV_LOG_LEVEL in os.environ:
        cfg.log_level = os.environ[ENV_LOG_LEVEL].upper()
        sources["log_level"] = f"env:{ENV_LOG_LEVEL}"

    return cfg, sources
