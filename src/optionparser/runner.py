from __future__ import annotations

import functools
import logging
from typing import Callable, Optional, TextIO, TypeVar

from .errors import SystemExitError

logger = logging.getLogger("optionparser.runner")

R = TypeVar("R")


def run_main(
    work: Callable[[], R],
    *,
    stream: Optional[TextIO] = None,
    exit: Optional[Callable[[int], object]] = None,
) -> R:
    """
    Run `work` and turn any SystemExitError it raises into a process exit.

    The failure is printed as "<prog_name>: <message>" on `stream` (stderr by
    default) and `exit` (sys.exit by default) is called with its exit code.
    Any other exception propagates untouched. When an injected `exit` returns
    instead of terminating, run_main returns None.

    sys.exit unwinds as SystemExit, so an outer handler can still intercept it
    and in a worker thread it only ends that thread. Pass exit=os._exit to
    terminate the whole process unconditionally.
    """
    try:
        return work()
    except SystemExitError as e:
        logger.debug("%s raised; exiting with status %d", type(e).__name__, e.exit_code)
        e.print_and_exit(stream=stream, exit=exit)
    return None  # type: ignore[return-value]


def exits_on_failure(func: Callable[..., R]) -> Callable[..., R]:
    """Decorator: call `func` through run_main with whatever arguments it gets."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return run_main(lambda: func(*args, **kwargs))

    return wrapper
