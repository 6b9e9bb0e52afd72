"""User-facing message templates used by the parser.

All messages are plain English and safe to show to the end user as-is.
"""
from __future__ import annotations

from typing import Final

from loanbook.commands.commands import HelpCommand

MESSAGE_INVALID_COMMAND_FORMAT: Final[str] = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND: Final[str] = "Unknown command"
MESSAGE_INVALID_INDEX: Final[str] = "Index is not a non-zero unsigned integer."
MESSAGE_DUPLICATE_FIELDS: Final[str] = (
    "Multiple values specified for the following single-valued field(s): {}"
)
MESSAGE_NOT_EDITED: Final[str] = "At least one field to edit must be provided."


def invalid_format(usage: str) -> str:
    """Fill the invalid-command-format template with ``usage``."""
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


MESSAGE_MALFORMED_INPUT: Final[str] = invalid_format(HelpCommand.MESSAGE_USAGE)
