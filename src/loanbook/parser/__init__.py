"""loanbook command parser.

Exports the ``CommandDispatcher``, the ``parse_command`` convenience
function, the registry types, the sub-parser base class, observers and
parse error types.
"""
from __future__ import annotations

from loanbook.parser.base import CommandParser
from loanbook.parser.dispatcher import CommandDispatcher, parse_command
from loanbook.parser.errors import (
    InvalidArgumentsError,
    MalformedInputError,
    ParseError,
    UnknownCommandError,
)
from loanbook.parser.observer import LoggingObserver, NullObserver, ParseObserver
from loanbook.parser.registry import (
    DEFAULT_REGISTRY,
    CommandRegistry,
    DuplicateKeywordError,
    EntryKind,
    RegistryEntry,
    build_default_registry,
)
from loanbook.parser.splitter import split_command

__all__ = [
    "CommandDispatcher",
    "parse_command",
    "CommandParser",
    "CommandRegistry",
    "RegistryEntry",
    "EntryKind",
    "DuplicateKeywordError",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "ParseObserver",
    "LoggingObserver",
    "NullObserver",
    "ParseError",
    "MalformedInputError",
    "UnknownCommandError",
    "InvalidArgumentsError",
    "split_command",
]
