"""Swap-rule tables consulted after the built-in verbs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .constants import RESERVED_VERBS
from .errors import RuleTableError
from .models import SwapRule

RuleTable = Mapping[str, SwapRule]


def build_rule_table(rules: Iterable[SwapRule]) -> RuleTable:
    """Index `rules` by verb.

    Raises RuleTableError if a verb is empty, appears twice, or names one of
    the built-in verbs, which are always matched first and would make the rule
    unreachable.
    """
    table: dict[str, SwapRule] = {}
    for rule in rules:
        if not rule.verb or not rule.replacement:
            raise RuleTableError(
                f"Swap rule needs a verb and a replacement: {rule.verb!r} -> {rule.replacement!r}."
            )
        if rule.verb in RESERVED_VERBS:
            raise RuleTableError(f"Verb '{rule.verb}' is built in and cannot be swapped.")
        if rule.verb in table:
            raise RuleTableError(f"Verb '{rule.verb}' has more than one swap rule.")
        table[rule.verb] = rule
    return MappingProxyType(table)


# The plain variant: no swaps, every other verb is simply not run.
CLASSIC_RULES: RuleTable = build_rule_table(())

EXTENDED_RULES: RuleTable = build_rule_table(
    (
        SwapRule(verb="ls", replacement="sl"),
        SwapRule(verb="sl", replacement="ls", requires_replacement=False),
        SwapRule(verb="vim", replacement="emacs"),
        SwapRule(verb="emacs", replacement="vim"),
    )
)

DEFAULT_RULES: RuleTable = EXTENDED_RULES
