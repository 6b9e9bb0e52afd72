"""Parse error types for the loanbook command parser.

Every failure of a parse call is a ``ParseError`` carrying a message that
can be shown to the user unchanged.  The three subclasses mirror the
three ways a line can be rejected:

MalformedInputError
    The line is empty or whitespace only, so there is no keyword.
UnknownCommandError
    The keyword is not in the registry.
InvalidArgumentsError
    The keyword is known but its sub-parser rejected the arguments.
"""
from __future__ import annotations

from loanbook.parser.messages import MESSAGE_MALFORMED_INPUT, MESSAGE_UNKNOWN_COMMAND


class ParseError(Exception):
    """Base class of every failure raised while parsing a command line.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MalformedInputError(ParseError):
    """Raised when a line cannot be split into a keyword and arguments."""

    def __init__(self, message: str = MESSAGE_MALFORMED_INPUT) -> None:
        super().__init__(message)


class UnknownCommandError(ParseError):
    """Raised when a keyword is not registered.

    Parameters
    ----------
    keyword:
        The keyword that failed lookup.
    """

    def __init__(self, keyword: str, message: str = MESSAGE_UNKNOWN_COMMAND) -> None:
        super().__init__(message)
        self.keyword = keyword


class InvalidArgumentsError(ParseError):
    """Raised by a sub-parser when the arguments do not fit its grammar."""
