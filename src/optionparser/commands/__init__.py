"""Subcommand registry.

A registrar is `registrar(subparsers) -> None`; modules in this package mark
theirs with @register and cli.build_parser() attaches all of them.
"""
from __future__ import annotations
from typing import Callable, List
import importlib
import pkgutil

Registrar = Callable[..., None]

_REGISTRY: List[Registrar] = []


def register(registrar: Registrar) -> Registrar:
    if registrar not in _REGISTRY:
        _REGISTRY.append(registrar)
    return registrar


def autodiscover() -> None:
    """Import every public submodule so its @register calls run (idempotent)."""
    for info in pkgutil.iter_modules(__path__):  # type: ignore[name-defined]
        if not info.name.startswith("_"):
            importlib.import_module(f"{__name__}.{info.name}")


def get_registry() -> List[Registrar]:
    return list(_REGISTRY)
