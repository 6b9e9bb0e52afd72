#!/usr/bin/env python3
"""Example: Quickstart — loanbook

Minimal working example: parse a handful of command lines, print the
resulting commands, and show how each kind of failure is reported.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install loanbook
"""
from __future__ import annotations

import loanbook
from loanbook.parser import ParseError

LINES = [
    "add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2 t/friends",
    "find alice",
    "issue 1 b/3 d/2026-12-01",
    "exit now please",
    "   ",
    "frobnicate 123",
    "delete",
]


def main() -> None:
    print(f"loanbook version: {loanbook.__version__}")
    print(f"Known commands: {', '.join(loanbook.available_commands())}\n")

    for line in LINES:
        try:
            command = loanbook.parse_command(line)
        except ParseError as exc:
            print(f"{line!r:<40} -> {type(exc).__name__}: {exc.message.splitlines()[0]}")
            continue
        print(f"{line!r:<40} -> {loanbook.to_dict(command)}")


if __name__ == "__main__":
    main()
