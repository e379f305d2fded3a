"""Domain models for dont."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

from pydantic import BaseModel


@dataclass(slots=True, frozen=True)
class Exit:
    """Terminate with `code` and do nothing else."""

    code: int
    kind: Literal["exit"] = "exit"


@dataclass(slots=True, frozen=True)
class Exec:
    """Replace this process with `tokens[0]`, passing `tokens[1:]` as arguments."""

    tokens: tuple[str, ...]
    kind: Literal["exec"] = "exec"

    def __post_init__(self) -> None:
        tokens = tuple(self.tokens)
        if not tokens:
            raise ValueError("Exec requires at least one token.")
        object.__setattr__(self, "tokens", tokens)

    @property
    def program(self) -> str:
        return self.tokens[0]

    @property
    def arguments(self) -> tuple[str, ...]:
        return self.tokens[1:]


Conclusion: TypeAlias = Exit | Exec


class SwapRule(BaseModel, frozen=True):
    verb: str
    replacement: str
    # When set, the rule only fires if `replacement` is on the search path.
    requires_replacement: bool = True

    def rewrite(self, tokens: Sequence[str]) -> Exec:
        """Return `tokens` with the verb replaced; arguments are kept in order."""
        return Exec((self.replacement, *tokens[1:]))
