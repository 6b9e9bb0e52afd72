"""Serialization of parsed commands to plain data, JSON and YAML.

The serialized form is a flat dict with a ``"kind"`` discriminator naming
the command class, followed by its fields.  Indices are written as the
one-based numbers the user typed, dates as ISO strings and tag sets as
sorted lists, so the output maps naturally to both formats.

Usage
-----
::

    from loanbook.commands.serializer import CommandSerializer

    serializer = CommandSerializer()
    data = serializer.to_dict(command)
    yaml_text = serializer.to_yaml(command)
"""
from __future__ import annotations

import datetime
import json
from dataclasses import fields

import yaml

from loanbook.commands.base import Command, Index


class CommandSerializer:
    """Converts ``Command`` objects into JSON-compatible dicts."""

    def to_dict(self, command: Command) -> dict[str, object]:
        """Serialize ``command`` to a JSON-compatible dict."""
        data: dict[str, object] = {
            "kind": type(command).__name__,
            "command_word": command.command_word,
        }
        for f in fields(command):
            data[f.name] = self._value_to_plain(getattr(command, f.name))
        return data

    def _value_to_plain(self, value: object) -> object:
        if isinstance(value, Index):
            return value.one_based
        if isinstance(value, datetime.date):
            return value.isoformat()
        if isinstance(value, frozenset):
            return sorted(value)
        if isinstance(value, tuple):
            return list(value)
        return value

    def to_json(self, command: Command, indent: int = 2) -> str:
        """Serialize ``command`` to a JSON string."""
        return json.dumps(self.to_dict(command), indent=indent, ensure_ascii=False)

    def to_yaml(self, command: Command) -> str:
        """Serialize ``command`` to a YAML string, keeping field order."""
        return yaml.safe_dump(
            self.to_dict(command),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
