"""Carry out a Conclusion: exit, or replace this process with another program."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Callable
from typing import NoReturn

from .constants import (
    COMMAND_DESCRIPTION_SEPARATOR,
    EXIT_FAILURE,
    LAUNCH_FAILURE_TEMPLATE,
)
from .models import Conclusion, Exit

logger = logging.getLogger(__name__)

# Takes the full command line and returns an exit status only if the program
# ran as a child; an in-place replacer never returns. Raises OSError or
# ValueError (empty program name, NUL in a token) if it could not launch.
Replacer = Callable[[tuple[str, ...]], int]


def exec_in_place(tokens: tuple[str, ...]) -> NoReturn:
    """Replace the process image. Does not return on success."""
    logger.debug("exec %r", tokens)
    os.execvp(tokens[0], tokens)


def spawn_and_relay(tokens: tuple[str, ...]) -> int:
    """Run `tokens` as a child on inherited streams and return its status."""
    logger.debug("spawn %r", tokens)
    completed = subprocess.run(list(tokens), check=False)
    logger.debug("child exited with %d", completed.returncode)
    return completed.returncode


def select_replacer(os_name: str | None = None) -> Replacer:
    """Pick in-place exec where the platform has real exec semantics."""
    if (os_name or os.name) == "posix":
        return exec_in_place
    # os.exec* on Windows starts a new process and exits the current one,
    # which breaks exit-status propagation to the caller.
    return spawn_and_relay


def describe_command(tokens: tuple[str, ...]) -> str:
    return COMMAND_DESCRIPTION_SEPARATOR.join(tokens)


def run(conclusion: Conclusion, replacer: Replacer | None = None) -> NoReturn:
    """Terminate according to `conclusion`. Never returns."""
    if isinstance(conclusion, Exit):
        logger.debug("exit %d", conclusion.code)
        sys.exit(conclusion.code)

    replace = replacer or select_replacer()
    # Nothing buffered on our side may be lost or reordered once the
    # replacement program owns the streams.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        status = replace(conclusion.tokens)
    except (OSError, ValueError) as exc:
        logger.debug("launch failed: %s", exc)
        print(
            LAUNCH_FAILURE_TEMPLATE.format(
                command=describe_command(conclusion.tokens),
                error=getattr(exc, "strerror", None) or exc,
            ),
            file=sys.stderr,
        )
        sys.exit(EXIT_FAILURE)
    sys.exit(status)
