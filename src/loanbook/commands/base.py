"""Base types shared by every command produced by the parser.

A ``Command`` is an immutable value describing one action the user asked
for.  The parser builds commands; executing them belongs to a separate
engine, so nothing here touches the address book or the library.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True, order=True)
class Index:
    """Position of an item in a displayed list.

    Users type one-based numbers; the stored value is zero-based so that
    it can be used directly against a Python sequence.

    Parameters
    ----------
    zero_based:
        0-based position.  Must not be negative.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError(f"Index must not be negative, got {self.zero_based}")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        """Build an ``Index`` from the number shown to the user."""
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        """The position as displayed to the user."""
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)


@dataclass(frozen=True)
class Command:
    """Base class of every parsed command.

    Subclasses are frozen dataclasses, so two commands parsed from the
    same input compare equal.  Each subclass declares the keyword that
    selects it and a usage message shown when its arguments are wrong.
    """

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    @property
    def command_word(self) -> str:
        """The keyword this command is registered under."""
        return type(self).COMMAND_WORD
