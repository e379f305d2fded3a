"""Map a command line to a Conclusion.

Pure: no I/O happens here. Whether a program exists is answered by the
`has_command` predicate the caller passes in.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .constants import EXIT_FAILURE, EXIT_SUCCESS, VERB_DONT, VERB_FALSE, VERB_TRUE
from .models import Conclusion, Exec, Exit
from .rules import DEFAULT_RULES, RuleTable

logger = logging.getLogger(__name__)

HasCommand = Callable[[str], bool]


def resolve(
    tokens: Sequence[str],
    has_command: HasCommand,
    rules: RuleTable = DEFAULT_RULES,
) -> Conclusion:
    """Decide what to do with `tokens`. First match wins:

    1. nothing given: exit 0
    2. ``true``: exit 1
    3. ``false``: exit 0
    4. ``dont``: run the rest unmodified, or exit 0 if nothing is left
    5. a swap rule for the verb whose condition holds: run the replacement
    6. anything else: exit 0
    """
    conclusion = _decide(tuple(tokens), has_command, rules)
    logger.debug("resolved %r -> %r", tokens, conclusion)
    return conclusion


def _decide(
    tokens: tuple[str, ...],
    has_command: HasCommand,
    rules: RuleTable,
) -> Conclusion:
    if not tokens:
        return Exit(EXIT_SUCCESS)

    verb = tokens[0]
    if verb == VERB_TRUE:
        return Exit(EXIT_FAILURE)
    if verb == VERB_FALSE:
        return Exit(EXIT_SUCCESS)
    if verb == VERB_DONT:
        return _strip_dont_layer(tokens)

    rule = rules.get(verb)
    if rule is not None:
        if not rule.requires_replacement or has_command(rule.replacement):
            return rule.rewrite(tokens)

    return Exit(EXIT_SUCCESS)


def _strip_dont_layer(tokens: tuple[str, ...]) -> Conclusion:
    # One layer is "dont" or "dont dont"; whatever follows is never inspected.
    rest = tokens[1:]
    if rest[:1] == (VERB_DONT,):
        rest = rest[1:]
    if not rest:
        return Exit(EXIT_SUCCESS)
    return Exec(rest)
