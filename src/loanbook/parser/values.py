"""Validation of individual argument values.

Each ``parse_*`` function strips its input, checks it against the field's
constraint and returns the normalised value, or raises
``InvalidArgumentsError`` with a message describing the constraint.
"""
from __future__ import annotations

import datetime
import re
from collections.abc import Iterable
from typing import Final

from loanbook.commands.base import Index
from loanbook.parser.errors import InvalidArgumentsError
from loanbook.parser.messages import MESSAGE_INVALID_INDEX

# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------

_UNSIGNED_INT: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_NAME: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE: Final[re.Pattern[str]] = re.compile(r"[0-9]{3,}")
_EMAIL: Final[re.Pattern[str]] = re.compile(
    r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
    r"@"
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?\.)*"
    r"[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])"
)
_TAG: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")
_ISO_DATE: Final[re.Pattern[str]] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

MESSAGE_NAME_CONSTRAINTS: Final[str] = (
    "Names should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
MESSAGE_PHONE_CONSTRAINTS: Final[str] = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)
MESSAGE_EMAIL_CONSTRAINTS: Final[str] = (
    "Emails should be of the format local-part@domain. The local-part should "
    "only contain alphanumeric characters and the special characters +_.- "
    "(not at the start or end), and the domain should be made of labels "
    "separated by periods, the last of which is at least 2 characters long"
)
MESSAGE_ADDRESS_CONSTRAINTS: Final[str] = "Addresses can take any values, and it should not be blank"
MESSAGE_TAG_CONSTRAINTS: Final[str] = "Tags names should be alphanumeric"
MESSAGE_TITLE_CONSTRAINTS: Final[str] = "Book titles can take any values, and it should not be blank"
MESSAGE_AUTHOR_CONSTRAINTS: Final[str] = "Author names can take any values, and it should not be blank"
MESSAGE_DATE_CONSTRAINTS: Final[str] = "Dates should be valid calendar dates in the format YYYY-MM-DD"
MESSAGE_DAYS_CONSTRAINTS: Final[str] = "Number of days should be a positive integer"


def _positive_int(text: str) -> int | None:
    if not _UNSIGNED_INT.fullmatch(text):
        return None
    try:
        value = int(text)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit.
        return None
    return value if value > 0 else None


def parse_index(text: str) -> Index:
    """Parse a one-based list position.

    Raises
    ------
    InvalidArgumentsError
        If ``text`` is not a non-zero unsigned integer.
    """
    value = _positive_int(text.strip())
    if value is None:
        raise InvalidArgumentsError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(value)


def parse_name(text: str) -> str:
    name = text.strip()
    if not _NAME.fullmatch(name):
        raise InvalidArgumentsError(MESSAGE_NAME_CONSTRAINTS)
    return name


def parse_phone(text: str) -> str:
    phone = text.strip()
    if not _PHONE.fullmatch(phone):
        raise InvalidArgumentsError(MESSAGE_PHONE_CONSTRAINTS)
    return phone


def parse_email(text: str) -> str:
    email = text.strip()
    if not _EMAIL.fullmatch(email):
        raise InvalidArgumentsError(MESSAGE_EMAIL_CONSTRAINTS)
    return email


def parse_address(text: str) -> str:
    address = text.strip()
    if not address:
        raise InvalidArgumentsError(MESSAGE_ADDRESS_CONSTRAINTS)
    return address


def parse_tag(text: str) -> str:
    tag = text.strip()
    if not _TAG.fullmatch(tag):
        raise InvalidArgumentsError(MESSAGE_TAG_CONSTRAINTS)
    return tag


def parse_tags(texts: Iterable[str]) -> frozenset[str]:
    """Parse every tag in ``texts``; duplicates collapse into one."""
    return frozenset(parse_tag(text) for text in texts)


def parse_title(text: str) -> str:
    title = text.strip()
    if not title:
        raise InvalidArgumentsError(MESSAGE_TITLE_CONSTRAINTS)
    return title


def parse_author(text: str) -> str:
    author = text.strip()
    if not author:
        raise InvalidArgumentsError(MESSAGE_AUTHOR_CONSTRAINTS)
    return author


def parse_date(text: str) -> datetime.date:
    """Parse an ISO ``YYYY-MM-DD`` calendar date."""
    value = text.strip()
    if not _ISO_DATE.fullmatch(value):
        raise InvalidArgumentsError(MESSAGE_DATE_CONSTRAINTS)
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise InvalidArgumentsError(MESSAGE_DATE_CONSTRAINTS) from None


def parse_days(text: str) -> int:
    value = _positive_int(text.strip())
    if value is None:
        raise InvalidArgumentsError(MESSAGE_DAYS_CONSTRAINTS)
    return value
