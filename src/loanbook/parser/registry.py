"""Command registry: the table mapping keywords to command factories.

A registry is built once from a list of ``RegistryEntry`` objects and is
read-only afterwards.  Each entry is one of two kinds:

CONSTANT
    The keyword selects a command that takes no arguments.  Invoking the
    entry builds that command and ignores any text after the keyword, so
    ``"exit now please"`` still exits.
PARSER
    The keyword selects a command with arguments.  Invoking the entry
    builds a fresh sub-parser and hands it the argument text.

Lookup is by exact string equality: no prefixes, no abbreviations and no
case folding.

Example
-------
::

    from loanbook.parser.registry import CommandRegistry, RegistryEntry

    registry = CommandRegistry([
        RegistryEntry.constant(ExitCommand),
        RegistryEntry.parser(DeleteCommand, DeleteCommandParser),
    ])
    command = registry.lookup("delete").invoke(" 1")
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from loanbook.commands.base import Command
from loanbook.commands.commands import (
    AddBookCommand,
    AddCommand,
    ClearCommand,
    DeleteBookCommand,
    DeleteCommand,
    DisplayOverdueCommand,
    EditCommand,
    ExitCommand,
    ExtendCommand,
    FindCommand,
    HelpCommand,
    IssueCommand,
    ListBookCommand,
    ListBorrowedBooksCommand,
    ListCommand,
    ReturnCommand,
)
from loanbook.parser.base import CommandParser
from loanbook.parser.errors import UnknownCommandError
from loanbook.parser.subparsers import (
    AddBookCommandParser,
    AddCommandParser,
    DeleteBookCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    ExtendCommandParser,
    FindCommandParser,
    IssueCommandParser,
    ListBorrowedBooksCommandParser,
    ListCommandParser,
    ReturnCommandParser,
)

logger = logging.getLogger(__name__)


class DuplicateKeywordError(ValueError):
    """Raised when two registry entries share a keyword."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(
            f"Keyword {keyword!r} is registered more than once. "
            "Every command must have a unique keyword."
        )


class EntryKind(Enum):
    """How a registry entry produces its command."""

    CONSTANT = auto()
    PARSER = auto()


@dataclass(frozen=True)
class RegistryEntry:
    """One keyword and the factory that builds its command.

    Parameters
    ----------
    keyword:
        The exact word that selects this entry.
    kind:
        Whether ``factory`` is a command class or a sub-parser class.
    factory:
        For ``CONSTANT`` entries, a zero-argument ``Command`` subclass.
        For ``PARSER`` entries, a ``CommandParser`` subclass.
    usage:
        Usage message of the command, for help listings.
    """

    keyword: str
    kind: EntryKind
    factory: type[Command] | type[CommandParser]
    usage: str = ""

    @classmethod
    def constant(cls, command_cls: type[Command]) -> "RegistryEntry":
        """Entry for a command that takes no arguments."""
        return cls(
            keyword=command_cls.COMMAND_WORD,
            kind=EntryKind.CONSTANT,
            factory=command_cls,
            usage=command_cls.MESSAGE_USAGE,
        )

    @classmethod
    def parser(
        cls, command_cls: type[Command], parser_cls: type[CommandParser]
    ) -> "RegistryEntry":
        """Entry for a command whose arguments are read by ``parser_cls``."""
        return cls(
            keyword=command_cls.COMMAND_WORD,
            kind=EntryKind.PARSER,
            factory=parser_cls,
            usage=command_cls.MESSAGE_USAGE,
        )

    def invoke(self, arguments: str) -> Command:
        """Build the command for this entry from ``arguments``.

        Raises
        ------
        loanbook.parser.errors.ParseError
            Whatever the sub-parser raises, unchanged.
        """
        if self.kind is EntryKind.CONSTANT:
            return self.factory()  # type: ignore[return-value]
        parser = self.factory()
        return parser.parse(arguments)  # type: ignore[union-attr]


class CommandRegistry:
    """Read-only mapping from keyword to ``RegistryEntry``.

    Parameters
    ----------
    entries:
        The entries to register.  Keywords must be unique.

    Raises
    ------
    DuplicateKeywordError
        If two entries share a keyword.
    """

    def __init__(self, entries: Iterable[RegistryEntry]) -> None:
        table: dict[str, RegistryEntry] = {}
        for entry in entries:
            if entry.keyword in table:
                raise DuplicateKeywordError(entry.keyword)
            table[entry.keyword] = entry
            logger.debug(
                "Registered command %r -> %s (%s)",
                entry.keyword,
                entry.factory.__qualname__,
                entry.kind.name,
            )
        self._entries: Mapping[str, RegistryEntry] = MappingProxyType(table)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, keyword: str) -> RegistryEntry:
        """Return the entry registered under ``keyword``.

        Raises
        ------
        UnknownCommandError
            If no entry is registered under exactly ``keyword``.
        """
        try:
            return self._entries[keyword]
        except KeyError:
            raise UnknownCommandError(keyword) from None

    @property
    def entries(self) -> Mapping[str, RegistryEntry]:
        """Read-only view of the keyword table."""
        return self._entries

    def keywords(self) -> list[str]:
        """Return all registered keywords in alphabetical order."""
        return sorted(self._entries)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"CommandRegistry(keywords={self.keywords()})"


def build_default_registry() -> CommandRegistry:
    """Return a registry holding every built-in command."""
    return CommandRegistry(
        [
            RegistryEntry.parser(AddCommand, AddCommandParser),
            RegistryEntry.parser(EditCommand, EditCommandParser),
            RegistryEntry.parser(DeleteCommand, DeleteCommandParser),
            RegistryEntry.constant(ClearCommand),
            RegistryEntry.parser(FindCommand, FindCommandParser),
            RegistryEntry.parser(ListCommand, ListCommandParser),
            RegistryEntry.constant(ExitCommand),
            RegistryEntry.constant(HelpCommand),
            RegistryEntry.parser(AddBookCommand, AddBookCommandParser),
            RegistryEntry.parser(DeleteBookCommand, DeleteBookCommandParser),
            RegistryEntry.constant(ListBookCommand),
            RegistryEntry.parser(IssueCommand, IssueCommandParser),
            RegistryEntry.parser(ReturnCommand, ReturnCommandParser),
            RegistryEntry.parser(ExtendCommand, ExtendCommandParser),
            RegistryEntry.parser(ListBorrowedBooksCommand, ListBorrowedBooksCommandParser),
            RegistryEntry.constant(DisplayOverdueCommand),
        ]
    )


DEFAULT_REGISTRY: CommandRegistry = build_default_registry()
