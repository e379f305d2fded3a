"""Search-path lookup backing the resolver's `has_command` predicate."""

from __future__ import annotations

import shutil


def has_command(name: str) -> bool:
    """Return True if an executable called `name` is on PATH."""
    return shutil.which(name) is not None
