"""CLI entry point for loanbook.

Invoked as::

    loanbook [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m loanbook.cli.main

Commands
--------
parse       Parse one command line and print the resulting command
commands    List every recognised command keyword with its usage
repl        Read command lines from stdin and parse each in turn
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from loanbook.commands.base import Command

console = Console()
err_console = Console(stderr=True)


def _parse_or_exit(line: str) -> "Command":
    """Parse ``line``, printing the failure and exiting on error."""
    from loanbook.parser import ParseError, parse_command

    try:
        return parse_command(line)
    except ParseError as exc:
        err_console.print(Text.assemble(("Error: ", "red"), exc.message))
        sys.exit(1)


def _summary(command: "Command") -> Text:
    """One-line rendering of a command for the REPL."""
    from loanbook.commands.serializer import CommandSerializer

    data = CommandSerializer().to_dict(command)
    kind = data.pop("kind")
    data.pop("command_word")
    details = ", ".join(f"{key}={value!r}" for key, value in data.items())
    return Text.assemble((str(kind), "bold green"), f"({details})")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="loanbook")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log parser diagnostics to stderr")
def cli(verbose: bool) -> None:
    """Command-line interpreter for a contacts and library-loans book."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from loanbook import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]loanbook[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# commands command
# ---------------------------------------------------------------------------


@cli.command(name="commands")
def commands_command() -> None:
    """List every recognised command keyword with its usage."""
    from loanbook.parser import DEFAULT_REGISTRY, EntryKind

    table = Table(title="Commands", show_lines=True)
    table.add_column("Keyword", style="bold", no_wrap=True)
    table.add_column("Arguments", no_wrap=True)
    table.add_column("Usage")

    for keyword in DEFAULT_REGISTRY.keywords():
        entry = DEFAULT_REGISTRY.lookup(keyword)
        arguments = "none" if entry.kind is EntryKind.CONSTANT else "required"
        table.add_row(keyword, arguments, Text(entry.usage))

    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("line")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format for the parsed command",
)
def parse_command_cli(line: str, output_format: str) -> None:
    """Parse one command line and print the resulting command.

    LINE is the full command line, quoted, e.g. "issue 1 b/3".

    Examples:

    \b
        loanbook parse "find alice bob"
        loanbook parse "add n/Jo p/123 e/jo@example.com a/Main St" --format yaml
    """
    from loanbook.commands.serializer import CommandSerializer

    command = _parse_or_exit(line)
    serializer = CommandSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(command, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(command)
        lang = "yaml"

    console.print(Syntax(text, lang, word_wrap=True))


# ---------------------------------------------------------------------------
# repl command
# ---------------------------------------------------------------------------


@cli.command(name="repl")
def repl_command() -> None:
    """Read command lines from stdin and parse each in turn.

    Every line produces one result: the parsed command or the error
    message.  Failures do not stop the loop; ``exit`` or end of input does.
    """
    from loanbook.commands.commands import ExitCommand
    from loanbook.parser import ParseError, parse_command

    stdin = click.get_text_stream("stdin")
    for line in stdin:
        try:
            command = parse_command(line)
        except ParseError as exc:
            err_console.print(Text.assemble(("Error: ", "red"), exc.message))
            continue
        console.print(_summary(command))
        if isinstance(command, ExitCommand):
            break


if __name__ == "__main__":
    cli()
