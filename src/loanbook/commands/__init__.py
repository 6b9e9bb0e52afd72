"""Command objects produced by the loanbook parser.

Exports the ``Command`` base class, the ``Index`` value type, every
concrete command, and the ``CommandSerializer``.
"""
from __future__ import annotations

from loanbook.commands.base import Command, Index
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
from loanbook.commands.serializer import CommandSerializer

__all__ = [
    "Command",
    "Index",
    "CommandSerializer",
    "AddBookCommand",
    "AddCommand",
    "ClearCommand",
    "DeleteBookCommand",
    "DeleteCommand",
    "DisplayOverdueCommand",
    "EditCommand",
    "ExitCommand",
    "ExtendCommand",
    "FindCommand",
    "HelpCommand",
    "IssueCommand",
    "ListBookCommand",
    "ListBorrowedBooksCommand",
    "ListCommand",
    "ReturnCommand",
]
