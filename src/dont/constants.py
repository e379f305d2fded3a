"""Centralized constants for dont."""

from __future__ import annotations

# Built-in verbs, checked before any swap rule
VERB_TRUE = "true"
VERB_FALSE = "false"
VERB_DONT = "dont"
RESERVED_VERBS = frozenset({VERB_TRUE, VERB_FALSE, VERB_DONT})

# Exit statuses
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# CLI args; only recognized in first position
ARG_HELP_LONG = "--help"
ARG_HELP_SHORT = "-h"
ARG_VERSION_LONG = "--version"
ARG_VERSION_SHORT = "-V"
ARG_SEPARATOR = "--"
PROG_NAME = "dont"
CLI_USAGE = """\
Usage: dont [--] [COMMAND]...

Don't run COMMAND. Or run something else instead.

  dont true        exits with 1
  dont false       exits with 0
  dont dont CMD    runs CMD as given
  dont ls          runs sl, if installed
  dont sl          runs ls
  dont vim         runs emacs, if installed
  dont emacs       runs vim, if installed
  dont CMD         does nothing and exits with 0

Options (first argument only):
  --help, -h       Show this help message and exit.
  --version, -V    Show the version and exit.
  --               Treat everything after it as COMMAND.
"""
CLI_HELP_HINT = "Run 'dont --help' for usage."
STDERR_ERROR_PREFIX = "ERROR: "
LAUNCH_FAILURE_TEMPLATE = "Failed to run {command}: {error}"
COMMAND_DESCRIPTION_SEPARATOR = " "
