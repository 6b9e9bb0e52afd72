"""Concrete command types.

Contacts
    ``add``, ``edit``, ``delete``, ``clear``, ``find``, ``list``
Books and loans
    ``addbook``, ``deletebook``, ``listbook``, ``issue``, ``return``,
    ``extend``, ``borrowed``, ``overdue``
Application
    ``help``, ``exit``

Every command is a frozen dataclass.  Field values have already been
validated by the matching sub-parser.
"""
from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import ClassVar

from loanbook.commands.base import Command, Index

# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddCommand(Command):
    """Add a person to the address book."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 t/friends t/owesMoney"
    )

    name: str
    phone: str
    email: str
    address: str
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class EditCommand(Command):
    """Edit the details of the person at ``index``.

    A field left as ``None`` keeps its current value.  ``tags`` set to an
    empty frozenset removes every tag.
    """

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the person identified by the index number "
        "used in the displayed person list. Existing values will be overwritten "
        "by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        "[n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )

    index: Index
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    tags: frozenset[str] | None = None

    @property
    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (self.name, self.phone, self.email, self.address, self.tags)
        )


@dataclass(frozen=True)
class DeleteCommand(Command):
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the person identified by the index number used in the "
        "displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )

    index: Index


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Clears all entries from the address book.\nExample: clear"


@dataclass(frozen=True)
class FindCommand(Command):
    """Find persons whose names contain any of ``keywords``."""

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all persons whose names contain any of the specified "
        "keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    keywords: tuple[str, ...]


@dataclass(frozen=True)
class ListCommand(Command):
    """List persons, optionally restricted to those carrying every tag in ``tags``."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = (
        "list: Lists all persons in the address book, or only those with all "
        "of the given tags.\n"
        "Parameters: [t/TAG]...\n"
        "Example: list t/friends"
    )

    tags: frozenset[str] = field(default_factory=frozenset)


# ---------------------------------------------------------------------------
# Books and loans
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddBookCommand(Command):
    COMMAND_WORD: ClassVar[str] = "addbook"
    MESSAGE_USAGE: ClassVar[str] = (
        "addbook: Adds a book to the library catalogue. "
        "Parameters: ti/TITLE au/AUTHOR\n"
        "Example: addbook ti/The Hobbit au/J. R. R. Tolkien"
    )

    title: str
    author: str


@dataclass(frozen=True)
class DeleteBookCommand(Command):
    COMMAND_WORD: ClassVar[str] = "deletebook"
    MESSAGE_USAGE: ClassVar[str] = (
        "deletebook: Deletes the book identified by the index number used in "
        "the displayed book list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deletebook 2"
    )

    index: Index


@dataclass(frozen=True)
class ListBookCommand(Command):
    COMMAND_WORD: ClassVar[str] = "listbook"
    MESSAGE_USAGE: ClassVar[str] = "listbook: Lists all books in the catalogue.\nExample: listbook"


@dataclass(frozen=True)
class IssueCommand(Command):
    """Lend the book at ``book_index`` to the person at ``person_index``.

    ``due_date`` is ``None`` when the user did not give one; the executing
    side then applies its default loan period.
    """

    COMMAND_WORD: ClassVar[str] = "issue"
    MESSAGE_USAGE: ClassVar[str] = (
        "issue: Issues a book to the person identified by the index number "
        "used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) b/BOOK_INDEX [d/DUE_DATE]\n"
        "Example: issue 1 b/3 d/2026-12-01"
    )

    person_index: Index
    book_index: Index
    due_date: datetime.date | None = None


@dataclass(frozen=True)
class ReturnCommand(Command):
    COMMAND_WORD: ClassVar[str] = "return"
    MESSAGE_USAGE: ClassVar[str] = (
        "return: Records the return of a book borrowed by the person identified "
        "by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) b/BOOK_INDEX\n"
        "Example: return 1 b/3"
    )

    person_index: Index
    book_index: Index


@dataclass(frozen=True)
class ExtendCommand(Command):
    COMMAND_WORD: ClassVar[str] = "extend"
    MESSAGE_USAGE: ClassVar[str] = (
        "extend: Extends the due date of a loan by a number of days.\n"
        "Parameters: INDEX (must be a positive integer) b/BOOK_INDEX days/DAYS\n"
        "Example: extend 1 b/3 days/7"
    )

    person_index: Index
    book_index: Index
    days: int


@dataclass(frozen=True)
class ListBorrowedBooksCommand(Command):
    COMMAND_WORD: ClassVar[str] = "borrowed"
    MESSAGE_USAGE: ClassVar[str] = (
        "borrowed: Lists the books currently borrowed by the person identified "
        "by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: borrowed 1"
    )

    person_index: Index


@dataclass(frozen=True)
class DisplayOverdueCommand(Command):
    COMMAND_WORD: ClassVar[str] = "overdue"
    MESSAGE_USAGE: ClassVar[str] = "overdue: Lists every loan that is past its due date.\nExample: overdue"


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows program usage instructions.\nExample: help"


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program.\nExample: exit"
