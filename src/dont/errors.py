"""Typed exceptions for dont."""


class DontError(Exception):
    """Base exception for dont failures."""


class RuleTableError(DontError):
    """Raised when a swap-rule table is inconsistent."""
