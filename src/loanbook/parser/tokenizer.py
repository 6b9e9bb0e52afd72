"""Prefix tokenizer for ``prefix/value`` style command arguments.

Given ``" 1 n/John Doe t/friend t/colleague"`` and the prefixes
``n/`` and ``t/``, the tokenizer produces::

    preamble:  "1"
    n/:        ["John Doe"]
    t/:        ["friend", "colleague"]

A prefix is only recognised at the start of the text or right after
whitespace, so ``"http://x"`` never matches ``p/``.
Values are stripped of surrounding whitespace.
"""
from __future__ import annotations

import re
from typing import Final

from loanbook.parser.errors import InvalidArgumentsError
from loanbook.parser.messages import MESSAGE_DUPLICATE_FIELDS

# ---------------------------------------------------------------------------
# Prefixes
# ---------------------------------------------------------------------------

PREFIX_NAME: Final[str] = "n/"
PREFIX_PHONE: Final[str] = "p/"
PREFIX_EMAIL: Final[str] = "e/"
PREFIX_ADDRESS: Final[str] = "a/"
PREFIX_TAG: Final[str] = "t/"
PREFIX_TITLE: Final[str] = "ti/"
PREFIX_AUTHOR: Final[str] = "au/"
PREFIX_BOOK: Final[str] = "b/"
PREFIX_DUE_DATE: Final[str] = "d/"
PREFIX_DAYS: Final[str] = "days/"


class ArgumentMultimap:
    """Values collected for each prefix, plus the preamble.

    Parameters
    ----------
    preamble:
        Text before the first recognised prefix, stripped.
    values:
        Mapping of prefix to the values given for it, in input order.
    """

    def __init__(self, preamble: str, values: dict[str, list[str]]) -> None:
        self._preamble = preamble
        self._values = values

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: str) -> str | None:
        """Return the last value given for ``prefix``, or ``None``."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        """Return every value given for ``prefix``, in input order."""
        return list(self._values.get(prefix, []))

    def has(self, *prefixes: str) -> bool:
        """Return True if every one of ``prefixes`` was given at least once."""
        return all(prefix in self._values for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """Reject repeated use of single-valued prefixes.

        Raises
        ------
        InvalidArgumentsError
            If any of ``prefixes`` was given more than once.
        """
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise InvalidArgumentsError(
                MESSAGE_DUPLICATE_FIELDS.format(" ".join(duplicated))
            )

    def __repr__(self) -> str:
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={self._values!r})"


def _prefix_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(r"(?:^|(?<=\s))" + re.escape(prefix))


def tokenize(arguments: str, *prefixes: str) -> ArgumentMultimap:
    """Split ``arguments`` on the given ``prefixes``.

    Parameters
    ----------
    arguments:
        Argument text as received by a sub-parser.
    prefixes:
        Prefixes to recognise.  Text that looks like a prefix but is not
        listed here stays part of the surrounding value.

    Returns
    -------
    ArgumentMultimap
        The preamble and the values found for each prefix.
    """
    positions: list[tuple[int, str]] = []
    for prefix in prefixes:
        for match in _prefix_pattern(prefix).finditer(arguments):
            positions.append((match.start(), prefix))
    positions.sort()

    preamble_end = positions[0][0] if positions else len(arguments)
    values: dict[str, list[str]] = {}
    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(arguments)
        values.setdefault(prefix, []).append(arguments[start + len(prefix):end].strip())

    return ArgumentMultimap(arguments[:preamble_end].strip(), values)
