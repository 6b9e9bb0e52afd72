"""Unit tests for loanbook.parser.values — field validators."""
from __future__ import annotations

import datetime

import pytest

from loanbook.commands.base import Index
from loanbook.parser.errors import InvalidArgumentsError
from loanbook.parser.messages import MESSAGE_INVALID_INDEX
from loanbook.parser.values import (
    MESSAGE_DATE_CONSTRAINTS,
    MESSAGE_EMAIL_CONSTRAINTS,
    MESSAGE_NAME_CONSTRAINTS,
    MESSAGE_PHONE_CONSTRAINTS,
    MESSAGE_TAG_CONSTRAINTS,
    parse_address,
    parse_author,
    parse_date,
    parse_days,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_tag,
    parse_tags,
    parse_title,
)


class TestParseIndex:
    def test_one_based_input(self) -> None:
        assert parse_index("1") == Index(0)

    def test_surrounding_whitespace(self) -> None:
        assert parse_index("  12 ") == Index.from_one_based(12)

    @pytest.mark.parametrize("text", ["", "0", "-1", "+1", "1.5", "a", "1 2", "00"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_index(text)
        assert exc_info.value.message == MESSAGE_INVALID_INDEX

    def test_oversized_number_rejected(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_index("1" * 5000)
        assert exc_info.value.message == MESSAGE_INVALID_INDEX


class TestParseName:
    def test_valid(self) -> None:
        assert parse_name(" John Doe 2nd ") == "John Doe 2nd"

    @pytest.mark.parametrize("text", ["", "   ", "J*hn", " -Amy"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_name(text)
        assert exc_info.value.message == MESSAGE_NAME_CONSTRAINTS


class TestParsePhone:
    def test_valid(self) -> None:
        assert parse_phone("911") == "911"

    @pytest.mark.parametrize("text", ["", "91", "9a11", "+6591234567"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_phone(text)
        assert exc_info.value.message == MESSAGE_PHONE_CONSTRAINTS


class TestParseEmail:
    @pytest.mark.parametrize(
        "text",
        ["johnd@example.com", "a.b-c+d_e@mail.example.org", "x@ab", "user@sub-domain.co"],
    )
    def test_valid(self, text: str) -> None:
        assert parse_email(f" {text} ") == text

    @pytest.mark.parametrize(
        "text",
        ["", "plain", "@example.com", "a@", "a@b", ".a@example.com", "a.@example.com", "a@-x.com", "a b@x.com"],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_email(text)
        assert exc_info.value.message == MESSAGE_EMAIL_CONSTRAINTS


class TestParseFreeText:
    def test_address(self) -> None:
        assert parse_address(" 311, Clementi Ave 2, #02-25 ") == "311, Clementi Ave 2, #02-25"

    def test_title_and_author(self) -> None:
        assert parse_title(" The Hobbit ") == "The Hobbit"
        assert parse_author("J. R. R. Tolkien") == "J. R. R. Tolkien"

    @pytest.mark.parametrize("parse", [parse_address, parse_title, parse_author])
    def test_blank_rejected(self, parse) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(InvalidArgumentsError, match="should not be blank"):
            parse("   ")


class TestParseTags:
    def test_single(self) -> None:
        assert parse_tag("friends") == "friends"

    def test_invalid(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_tag("best friend")
        assert exc_info.value.message == MESSAGE_TAG_CONSTRAINTS

    def test_duplicates_collapse(self) -> None:
        assert parse_tags(["a", "b", "a"]) == frozenset({"a", "b"})

    def test_empty_iterable(self) -> None:
        assert parse_tags([]) == frozenset()


class TestParseDate:
    def test_valid(self) -> None:
        assert parse_date("2026-12-01") == datetime.date(2026, 12, 1)

    @pytest.mark.parametrize("text", ["", "2026-13-01", "2026-02-30", "01-12-2026", "20261201", "2026-1-1"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_date(text)
        assert exc_info.value.message == MESSAGE_DATE_CONSTRAINTS


class TestParseDays:
    def test_valid(self) -> None:
        assert parse_days(" 14 ") == 14

    @pytest.mark.parametrize("text", ["", "0", "-3", "two"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidArgumentsError, match="positive integer"):
            parse_days(text)

    def test_oversized_number_rejected(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="positive integer"):
            parse_days("7" * 5000)
