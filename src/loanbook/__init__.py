"""loanbook — command-line interpreter for a contacts and library-loans book.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import loanbook

    command = loanbook.parse_command("find alice")
    command.keywords
    ('alice',)

    loanbook.to_dict(loanbook.parse_command("delete 2"))
    {'kind': 'DeleteCommand', 'command_word': 'delete', 'index': 2}

    loanbook.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from loanbook.commands.base import Command


def parse_command(user_input: str) -> "Command":
    """Parse one line of user input into a ``Command``.

    Parameters
    ----------
    user_input:
        The line as typed by the user.

    Returns
    -------
    Command
        The parsed, ready-to-execute command.

    Raises
    ------
    loanbook.parser.MalformedInputError
        If the line is empty or whitespace only.
    loanbook.parser.UnknownCommandError
        If the first word is not a known command.
    loanbook.parser.InvalidArgumentsError
        If the command's arguments are invalid.
    """
    from loanbook.parser.dispatcher import parse_command as _parse_command

    return _parse_command(user_input)


def available_commands() -> list[str]:
    """Return the keywords of every built-in command, sorted."""
    from loanbook.parser.registry import DEFAULT_REGISTRY

    return DEFAULT_REGISTRY.keywords()


def to_dict(command: "Command") -> dict[str, object]:
    """Serialize ``command`` to a JSON-compatible dict."""
    from loanbook.commands.serializer import CommandSerializer

    return CommandSerializer().to_dict(command)


__all__ = [
    "__version__",
    "parse_command",
    "available_commands",
    "to_dict",
]
