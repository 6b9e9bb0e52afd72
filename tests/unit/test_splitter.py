"""Unit tests for loanbook.parser.splitter — keyword/arguments separation."""
from __future__ import annotations

import pytest

from loanbook.commands.commands import HelpCommand
from loanbook.parser.errors import MalformedInputError, ParseError
from loanbook.parser.splitter import split_command


class TestSplitCommand:
    def test_keyword_only(self) -> None:
        assert split_command("list") == ("list", "")

    def test_keyword_and_arguments_keep_leading_space(self) -> None:
        assert split_command("delete 3") == ("delete", " 3")

    def test_outer_whitespace_is_trimmed(self) -> None:
        assert split_command("   find alice  \n") == ("find", " alice")

    def test_inner_whitespace_is_preserved(self) -> None:
        keyword, arguments = split_command("add   n/John   Doe\tp/123")
        assert keyword == "add"
        assert arguments == "   n/John   Doe\tp/123"

    def test_keyword_is_longest_non_whitespace_run(self) -> None:
        assert split_command("n/John p/1") == ("n/John", " p/1")

    def test_tab_separates_keyword(self) -> None:
        assert split_command("find\talice") == ("find", "\talice")

    def test_embedded_newline_stays_in_arguments(self) -> None:
        assert split_command("find a\nb") == ("find", " a\nb")

    def test_keyword_case_is_preserved(self) -> None:
        assert split_command("EXIT") == ("EXIT", "")


class TestSplitCommandMalformed:
    @pytest.mark.parametrize("line", ["", " ", "   ", "\t", "\n", " \t \n "])
    def test_whitespace_only_is_malformed(self, line: str) -> None:
        with pytest.raises(MalformedInputError):
            split_command(line)

    def test_malformed_is_parse_error(self) -> None:
        with pytest.raises(ParseError):
            split_command("")

    def test_malformed_message_references_help_usage(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            split_command("  ")
        assert exc_info.value.message.startswith("Invalid command format!")
        assert HelpCommand.MESSAGE_USAGE in exc_info.value.message
