"""Unit tests for loanbook.commands.serializer — dict, JSON and YAML output."""
from __future__ import annotations

import datetime
import json

import yaml

from loanbook.commands.base import Index
from loanbook.commands.commands import (
    AddCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    IssueCommand,
)
from loanbook.commands.serializer import CommandSerializer


def _serializer() -> CommandSerializer:
    return CommandSerializer()


class TestToDict:
    def test_constant_command(self) -> None:
        assert _serializer().to_dict(ExitCommand()) == {"kind": "ExitCommand", "command_word": "exit"}

    def test_index_is_one_based(self) -> None:
        data = _serializer().to_dict(
            IssueCommand(person_index=Index(0), book_index=Index(4))
        )
        assert data["person_index"] == 1
        assert data["book_index"] == 5
        assert data["due_date"] is None

    def test_date_is_iso_string(self) -> None:
        command = IssueCommand(
            person_index=Index(0), book_index=Index(0), due_date=datetime.date(2026, 3, 9)
        )
        assert _serializer().to_dict(command)["due_date"] == "2026-03-09"

    def test_tags_are_sorted_list(self) -> None:
        command = AddCommand(
            name="Amy", phone="123", email="a@bc", address="X", tags=frozenset({"b", "a"})
        )
        assert _serializer().to_dict(command)["tags"] == ["a", "b"]

    def test_keywords_tuple_becomes_list(self) -> None:
        assert _serializer().to_dict(FindCommand(keywords=("x", "y")))["keywords"] == ["x", "y"]

    def test_unset_edit_fields_are_none(self) -> None:
        data = _serializer().to_dict(EditCommand(index=Index(0), name="Bob"))
        assert data["name"] == "Bob"
        assert data["phone"] is None
        assert data["tags"] is None

    def test_kind_comes_first(self) -> None:
        data = _serializer().to_dict(FindCommand(keywords=("x",)))
        assert list(data)[:2] == ["kind", "command_word"]


class TestTextFormats:
    def test_json_loads_back_to_dict(self) -> None:
        command = FindCommand(keywords=("alice",))
        assert json.loads(_serializer().to_json(command)) == _serializer().to_dict(command)

    def test_yaml_loads_back_to_dict(self) -> None:
        command = AddCommand(
            name="Zoë", phone="123", email="z@example.com", address="1 Rue", tags=frozenset({"x"})
        )
        text = _serializer().to_yaml(command)
        assert "Zoë" in text
        assert yaml.safe_load(text) == _serializer().to_dict(command)

    def test_yaml_keeps_field_order(self) -> None:
        text = _serializer().to_yaml(ExitCommand())
        assert text.splitlines()[0] == "kind: ExitCommand"
