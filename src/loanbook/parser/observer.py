"""Diagnostic observers for the command dispatcher.

The dispatcher reports what it saw to a ``ParseObserver`` instead of
writing to a global logger.  Observers are informational only: they
cannot change the outcome of a parse.

Usage
-----
::

    from loanbook.parser.dispatcher import CommandDispatcher
    from loanbook.parser.observer import NullObserver

    dispatcher = CommandDispatcher(observer=NullObserver())
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from loanbook.parser.errors import ParseError

_module_logger = logging.getLogger(__name__)


@runtime_checkable
class ParseObserver(Protocol):
    """Protocol for receivers of dispatcher diagnostics."""

    def on_split(self, keyword: str, arguments: str) -> None:
        """Called once a line has been split into keyword and arguments."""
        ...  # pragma: no cover

    def on_failure(self, user_input: str, error: "ParseError") -> None:
        """Called with the raw line whenever a parse fails."""
        ...  # pragma: no cover


class LoggingObserver:
    """Writes dispatcher diagnostics to a ``logging.Logger`` at DEBUG level.

    Parameters
    ----------
    logger:
        Logger to write to.  Defaults to this module's logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else _module_logger

    def on_split(self, keyword: str, arguments: str) -> None:
        self._logger.debug("Command word: %r; Arguments: %r", keyword, arguments)

    def on_failure(self, user_input: str, error: "ParseError") -> None:
        self._logger.debug(
            "This user input caused a %s: %r", type(error).__name__, user_input
        )


class NullObserver:
    """Discards all diagnostics."""

    def on_split(self, keyword: str, arguments: str) -> None:
        pass

    def on_failure(self, user_input: str, error: "ParseError") -> None:
        pass
