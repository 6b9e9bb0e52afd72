#!/usr/bin/env python3
"""Example: Custom registry — loanbook

Build a dispatcher over a registry that adds one extra command to the
built-in set, and route parser diagnostics to the standard logger.

Usage:
    python examples/02_custom_registry.py

Requirements:
    pip install loanbook
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from loanbook.commands import Command
from loanbook.parser import (
    DEFAULT_REGISTRY,
    CommandDispatcher,
    CommandParser,
    CommandRegistry,
    InvalidArgumentsError,
    LoggingObserver,
    RegistryEntry,
)


@dataclass(frozen=True)
class RenewAllCommand(Command):
    COMMAND_WORD: ClassVar[str] = "renewall"
    MESSAGE_USAGE: ClassVar[str] = "renewall: Renews every loan of a member.\nExample: renewall 2"

    member: int


class RenewAllCommandParser(CommandParser):
    def parse(self, arguments: str) -> RenewAllCommand:
        text = arguments.strip()
        if not text.isdigit() or int(text) == 0:
            raise InvalidArgumentsError(RenewAllCommand.MESSAGE_USAGE)
        return RenewAllCommand(member=int(text))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    registry = CommandRegistry(
        [*DEFAULT_REGISTRY, RegistryEntry.parser(RenewAllCommand, RenewAllCommandParser)]
    )
    dispatcher = CommandDispatcher(registry=registry, observer=LoggingObserver())

    print(dispatcher.parse_command("renewall 2"))
    print(dispatcher.parse_command("listbook"))


if __name__ == "__main__":
    main()
