"""Argument parsers for every command that takes arguments.

Each parser implements :class:`~loanbook.parser.base.CommandParser`.
Grammar violations (missing prefixes, stray preamble, unparsable index)
are reported with the invalid-format message filled with the command's
usage; a value that is present but breaks its field constraint is
reported with that constraint's message instead.
"""
from __future__ import annotations

from loanbook.commands.base import Index
from loanbook.commands.commands import (
    AddBookCommand,
    AddCommand,
    DeleteBookCommand,
    DeleteCommand,
    EditCommand,
    ExtendCommand,
    FindCommand,
    IssueCommand,
    ListBorrowedBooksCommand,
    ListCommand,
    ReturnCommand,
)
from loanbook.parser.base import CommandParser
from loanbook.parser.errors import InvalidArgumentsError
from loanbook.parser.messages import MESSAGE_NOT_EDITED, invalid_format
from loanbook.parser.tokenizer import (
    PREFIX_ADDRESS,
    PREFIX_AUTHOR,
    PREFIX_BOOK,
    PREFIX_DAYS,
    PREFIX_DUE_DATE,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    PREFIX_TITLE,
    ArgumentMultimap,
    tokenize,
)
from loanbook.parser.values import (
    parse_address,
    parse_author,
    parse_date,
    parse_days,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_tags,
    parse_title,
)


def _leading_index(text: str, usage: str) -> Index:
    """Parse the index that starts a command, reporting failures as bad format."""
    try:
        return parse_index(text)
    except InvalidArgumentsError as exc:
        raise InvalidArgumentsError(invalid_format(usage)) from exc


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


class AddCommandParser(CommandParser):
    def parse(self, arguments: str) -> AddCommand:
        multimap = tokenize(
            arguments, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG
        )
        if (
            not multimap.has(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
            or multimap.preamble
        ):
            raise InvalidArgumentsError(invalid_format(AddCommand.MESSAGE_USAGE))

        multimap.verify_no_duplicate_prefixes_for(
            PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS
        )
        return AddCommand(
            name=parse_name(multimap.get_value(PREFIX_NAME) or ""),
            phone=parse_phone(multimap.get_value(PREFIX_PHONE) or ""),
            email=parse_email(multimap.get_value(PREFIX_EMAIL) or ""),
            address=parse_address(multimap.get_value(PREFIX_ADDRESS) or ""),
            tags=parse_tags(multimap.get_all_values(PREFIX_TAG)),
        )


class EditCommandParser(CommandParser):
    """Parses ``INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...``.

    A single empty ``t/`` clears all tags of the person.
    """

    def parse(self, arguments: str) -> EditCommand:
        multimap = tokenize(
            arguments, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG
        )
        index = _leading_index(multimap.preamble, EditCommand.MESSAGE_USAGE)
        multimap.verify_no_duplicate_prefixes_for(
            PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS
        )

        name = multimap.get_value(PREFIX_NAME)
        phone = multimap.get_value(PREFIX_PHONE)
        email = multimap.get_value(PREFIX_EMAIL)
        address = multimap.get_value(PREFIX_ADDRESS)
        command = EditCommand(
            index=index,
            name=parse_name(name) if name is not None else None,
            phone=parse_phone(phone) if phone is not None else None,
            email=parse_email(email) if email is not None else None,
            address=parse_address(address) if address is not None else None,
            tags=self._parse_tags_for_edit(multimap),
        )
        if not command.is_any_field_edited:
            raise InvalidArgumentsError(MESSAGE_NOT_EDITED)
        return command

    @staticmethod
    def _parse_tags_for_edit(multimap: ArgumentMultimap) -> frozenset[str] | None:
        tags = multimap.get_all_values(PREFIX_TAG)
        if not tags:
            return None
        if tags == [""]:
            return frozenset()
        return parse_tags(tags)


class DeleteCommandParser(CommandParser):
    def parse(self, arguments: str) -> DeleteCommand:
        return DeleteCommand(index=_leading_index(arguments, DeleteCommand.MESSAGE_USAGE))


class FindCommandParser(CommandParser):
    def parse(self, arguments: str) -> FindCommand:
        keywords = arguments.split()
        if not keywords:
            raise InvalidArgumentsError(invalid_format(FindCommand.MESSAGE_USAGE))
        return FindCommand(keywords=tuple(keywords))


class ListCommandParser(CommandParser):
    def parse(self, arguments: str) -> ListCommand:
        multimap = tokenize(arguments, PREFIX_TAG)
        if multimap.preamble:
            raise InvalidArgumentsError(invalid_format(ListCommand.MESSAGE_USAGE))
        return ListCommand(tags=parse_tags(multimap.get_all_values(PREFIX_TAG)))


# ---------------------------------------------------------------------------
# Books and loans
# ---------------------------------------------------------------------------


class AddBookCommandParser(CommandParser):
    def parse(self, arguments: str) -> AddBookCommand:
        multimap = tokenize(arguments, PREFIX_TITLE, PREFIX_AUTHOR)
        if not multimap.has(PREFIX_TITLE, PREFIX_AUTHOR) or multimap.preamble:
            raise InvalidArgumentsError(invalid_format(AddBookCommand.MESSAGE_USAGE))

        multimap.verify_no_duplicate_prefixes_for(PREFIX_TITLE, PREFIX_AUTHOR)
        return AddBookCommand(
            title=parse_title(multimap.get_value(PREFIX_TITLE) or ""),
            author=parse_author(multimap.get_value(PREFIX_AUTHOR) or ""),
        )


class DeleteBookCommandParser(CommandParser):
    def parse(self, arguments: str) -> DeleteBookCommand:
        return DeleteBookCommand(
            index=_leading_index(arguments, DeleteBookCommand.MESSAGE_USAGE)
        )


class IssueCommandParser(CommandParser):
    """Parses ``INDEX b/BOOK_INDEX [d/DUE_DATE]``."""

    def parse(self, arguments: str) -> IssueCommand:
        multimap = tokenize(arguments, PREFIX_BOOK, PREFIX_DUE_DATE)
        person_index = _leading_index(multimap.preamble, IssueCommand.MESSAGE_USAGE)
        if not multimap.has(PREFIX_BOOK):
            raise InvalidArgumentsError(invalid_format(IssueCommand.MESSAGE_USAGE))

        multimap.verify_no_duplicate_prefixes_for(PREFIX_BOOK, PREFIX_DUE_DATE)
        due_date = multimap.get_value(PREFIX_DUE_DATE)
        return IssueCommand(
            person_index=person_index,
            book_index=parse_index(multimap.get_value(PREFIX_BOOK) or ""),
            due_date=parse_date(due_date) if due_date is not None else None,
        )


class ReturnCommandParser(CommandParser):
    def parse(self, arguments: str) -> ReturnCommand:
        multimap = tokenize(arguments, PREFIX_BOOK)
        person_index = _leading_index(multimap.preamble, ReturnCommand.MESSAGE_USAGE)
        if not multimap.has(PREFIX_BOOK):
            raise InvalidArgumentsError(invalid_format(ReturnCommand.MESSAGE_USAGE))

        multimap.verify_no_duplicate_prefixes_for(PREFIX_BOOK)
        return ReturnCommand(
            person_index=person_index,
            book_index=parse_index(multimap.get_value(PREFIX_BOOK) or ""),
        )


class ExtendCommandParser(CommandParser):
    def parse(self, arguments: str) -> ExtendCommand:
        multimap = tokenize(arguments, PREFIX_BOOK, PREFIX_DAYS)
        person_index = _leading_index(multimap.preamble, ExtendCommand.MESSAGE_USAGE)
        if not multimap.has(PREFIX_BOOK, PREFIX_DAYS):
            raise InvalidArgumentsError(invalid_format(ExtendCommand.MESSAGE_USAGE))

        multimap.verify_no_duplicate_prefixes_for(PREFIX_BOOK, PREFIX_DAYS)
        return ExtendCommand(
            person_index=person_index,
            book_index=parse_index(multimap.get_value(PREFIX_BOOK) or ""),
            days=parse_days(multimap.get_value(PREFIX_DAYS) or ""),
        )


class ListBorrowedBooksCommandParser(CommandParser):
    def parse(self, arguments: str) -> ListBorrowedBooksCommand:
        return ListBorrowedBooksCommand(
            person_index=_leading_index(arguments, ListBorrowedBooksCommand.MESSAGE_USAGE)
        )
