"""Initial separation of a command line into keyword and arguments."""
from __future__ import annotations

import re
from typing import Final

from loanbook.parser.errors import MalformedInputError

_BASIC_COMMAND_FORMAT: Final[re.Pattern[str]] = re.compile(
    r"(?P<keyword>\S+)(?P<arguments>.*)", re.DOTALL
)


def split_command(user_input: str) -> tuple[str, str]:
    """Split ``user_input`` into ``(keyword, arguments)``.

    The line is trimmed first.  The keyword is the leading run of
    non-whitespace characters; the arguments are everything after it,
    including the whitespace that separates them from the keyword.

    Raises
    ------
    MalformedInputError
        If the line is empty after trimming.
    """
    match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
    if match is None:
        raise MalformedInputError()
    return match.group("keyword"), match.group("arguments")
