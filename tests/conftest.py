"""Shared test fixtures for loanbook.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from loanbook.parser.dispatcher import CommandDispatcher
from loanbook.parser.errors import ParseError


class RecordingObserver:
    """Observer that keeps every notification for later assertions."""

    def __init__(self) -> None:
        self.splits: list[tuple[str, str]] = []
        self.failures: list[tuple[str, ParseError]] = []

    def on_split(self, keyword: str, arguments: str) -> None:
        self.splits.append((keyword, arguments))

    def on_failure(self, user_input: str, error: ParseError) -> None:
        self.failures.append((user_input, error))


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "loanbook"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def recording_observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def dispatcher(recording_observer: RecordingObserver) -> CommandDispatcher:
    """A dispatcher over the built-in commands that records diagnostics."""
    return CommandDispatcher(observer=recording_observer)
