"""CLI argument boundary and application startup."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from . import __version__
from .constants import (
    ARG_HELP_LONG,
    ARG_HELP_SHORT,
    ARG_SEPARATOR,
    ARG_VERSION_LONG,
    ARG_VERSION_SHORT,
    CLI_HELP_HINT,
    CLI_USAGE,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    PROG_NAME,
    STDERR_ERROR_PREFIX,
)
from .errors import DontError
from .executor import run
from .logging_utils import setup_logging
from .models import SwapRule
from .path_lookup import has_command
from .resolver import resolve
from .rules import DEFAULT_RULES, build_rule_table


@dataclass
class AppArgs:
    tokens: tuple[str, ...]


def parse_args(argv: list[str] | None = None) -> AppArgs | None:
    """Split off the command line to negate. Returns None if help or version was shown.

    Only the first argument can be an option of dont itself. Everything after
    it is passed on untouched, hyphens and all.
    """
    args = list(argv if argv is not None else sys.argv[1:])

    if args:
        first = args[0]
        if first in (ARG_HELP_LONG, ARG_HELP_SHORT):
            print(CLI_USAGE, end="")
            return None
        if first in (ARG_VERSION_LONG, ARG_VERSION_SHORT):
            print(f"{PROG_NAME} {__version__}")
            return None
        if first == ARG_SEPARATOR:
            args = args[1:]

    return AppArgs(tokens=tuple(args))


def main(
    argv: list[str] | None = None,
    *,
    rules: Iterable[SwapRule] | None = None,
    log_file: str | Path | None = None,
) -> NoReturn:
    """Application entry point."""
    setup_logging(log_file)

    app_args = parse_args(argv)
    if app_args is None:
        sys.exit(EXIT_SUCCESS)

    try:
        rule_table = DEFAULT_RULES if rules is None else build_rule_table(rules)
    except DontError as exc:
        _die(str(exc))

    run(resolve(app_args.tokens, has_command, rule_table))


def _die(message: str) -> NoReturn:
    print(f"{STDERR_ERROR_PREFIX}{message}", file=sys.stderr)
    print(CLI_HELP_HINT, file=sys.stderr)
    sys.exit(EXIT_FAILURE)
