"""Pytest configuration and fixtures for dont tests."""

from __future__ import annotations

import logging

import pytest

from test_helpers import RecordingLookup


@pytest.fixture
def lookup() -> RecordingLookup:
    return RecordingLookup()


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging(), which disables logging or replaces root handlers."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.disable(logging.NOTSET)
