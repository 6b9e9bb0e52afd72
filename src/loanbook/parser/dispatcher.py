"""Command dispatcher: turns one line of user input into a ``Command``.

Each call moves through four steps and ends in exactly one outcome:

1. *split* the trimmed line into keyword and arguments; an empty line
   fails with ``MalformedInputError``;
2. *look up* the keyword; an unregistered keyword fails with
   ``UnknownCommandError``;
3. *delegate* the arguments to the registry entry, which either builds a
   zero-argument command or runs a fresh sub-parser;
4. return the command, or let the sub-parser's ``InvalidArgumentsError``
   propagate unchanged.

The dispatcher holds no mutable state, so one instance may be shared
between threads.
"""
from __future__ import annotations

from loanbook.commands.base import Command
from loanbook.parser.errors import ParseError
from loanbook.parser.observer import LoggingObserver, ParseObserver
from loanbook.parser.registry import DEFAULT_REGISTRY, CommandRegistry
from loanbook.parser.splitter import split_command


class CommandDispatcher:
    """Parses user input into commands for execution.

    Parameters
    ----------
    registry:
        Keyword table to resolve commands against.  Defaults to every
        built-in command.
    observer:
        Receiver of diagnostics.  Defaults to a ``LoggingObserver``.
    """

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        observer: ParseObserver | None = None,
    ) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._observer: ParseObserver = observer if observer is not None else LoggingObserver()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def parse_command(self, user_input: str) -> Command:
        """Parse ``user_input`` into a command.

        Parameters
        ----------
        user_input:
            One full line as typed by the user.

        Returns
        -------
        Command
            The command described by ``user_input``.

        Raises
        ------
        MalformedInputError
            If the line is empty or whitespace only.
        UnknownCommandError
            If the keyword is not registered.
        InvalidArgumentsError
            If the command's sub-parser rejects the arguments.
        """
        try:
            keyword, arguments = split_command(user_input)
            self._observer.on_split(keyword, arguments)
            entry = self._registry.lookup(keyword)
            return entry.invoke(arguments)
        except ParseError as exc:
            self._observer.on_failure(user_input, exc)
            raise


_default_dispatcher = CommandDispatcher()


def parse_command(user_input: str) -> Command:
    """Parse ``user_input`` with the built-in commands.

    See :meth:`CommandDispatcher.parse_command`.
    """
    return _default_dispatcher.parse_command(user_input)
