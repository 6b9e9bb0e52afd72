"""Abstract base class for command-specific argument parsers."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loanbook.commands.base import Command


class CommandParser(ABC):
    """Turns the argument text of one command into a ``Command``.

    The dispatcher constructs a fresh instance for every line and calls
    :meth:`parse` exactly once, passing the arguments exactly as they
    followed the keyword (leading whitespace included).  Implementations
    keep no state between calls.
    """

    @abstractmethod
    def parse(self, arguments: str) -> "Command":
        """Parse ``arguments`` into a command.

        Parameters
        ----------
        arguments:
            Text after the keyword, unmodified.

        Returns
        -------
        Command
            The command described by ``arguments``.

        Raises
        ------
        loanbook.parser.errors.InvalidArgumentsError
            If ``arguments`` do not satisfy this command's grammar.
        """
