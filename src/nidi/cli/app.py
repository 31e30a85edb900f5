"""CLI application entry point and command routing for nidi.

This module is the **sole error boundary** for the entire application.
It catches :class:`~nidi.exceptions.NidiError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Routing rules
-------------
* Global flags come before the command token.  The first token that is
  not an option (or whatever follows ``--``) selects the command.
* No command token, or a token that names no registered command, runs
  the descriptor's default action: print help and exit 0.  An unknown
  command is never an error.
* Unknown options and malformed flag values raise
  :class:`~nidi.exceptions.UsageError`, which is fatal.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any, NoReturn

from rich.markup import escape

from nidi.cli import exit_codes
from nidi.cli.commands import list_commands
from nidi.cli.console import console, stdout
from nidi.core.help import render_command_help, render_help
from nidi.core.models import (
    ApplicationDescriptor,
    CommandDescriptor,
    FlagDescriptor,
    FlagKind,
    Invocation,
)
from nidi.core.ordering import normalize
from nidi.exceptions import DuplicateNameError, NidiError, UsageError, append_help_suggestion
from nidi.utils.log import configure_logging
from nidi.version import __version__

logger = logging.getLogger(__name__)

APP_NAME = "nidi"
APP_USAGE = "A CLI to config your laptop as code"


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------

def show_help(descriptor: ApplicationDescriptor) -> int:
    """Default action: print the full application help and succeed."""
    stdout.write(render_help(descriptor))
    return exit_codes.SUCCESS


def build() -> ApplicationDescriptor:
    """Construct the ``nidi`` application descriptor."""
    return ApplicationDescriptor(
        name=APP_NAME,
        usage=APP_USAGE,
        version=__version__,
        global_flags=(
            FlagDescriptor(name="debug", kind=FlagKind.BOOLEAN, usage="enable debug"),
        ),
        commands=list_commands(),
        default_action=show_help,
    )


def command_table(descriptor: ApplicationDescriptor) -> dict[str, CommandDescriptor]:
    """Map command names to descriptors.

    Raises
    ------
    DuplicateNameError
        When two commands, or two flags of one command, share a name.
    """
    table: dict[str, CommandDescriptor] = {}
    for command in descriptor.commands:
        if command.name in table:
            raise DuplicateNameError(f"Command {command.name!r} is registered twice.")
        flag_names = [flag.name for flag in command.flags]
        if len(set(flag_names)) != len(flag_names):
            raise DuplicateNameError(
                f"Command {command.name!r} declares the same flag twice."
            )
        table[command.name] = command
    return table


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=append_help_suggestion(None, self.prog))


def number(value: str) -> int | float:
    """argparse ``type`` for numeric flags."""
    try:
        return int(value)
    except ValueError:
        return float(value)


_FLAG_TYPES: dict[FlagKind, Callable[[str], Any]] = {
    FlagKind.STRING: str,
    FlagKind.NUMERIC: number,
}


def _add_flag(parser: argparse.ArgumentParser, flag: FlagDescriptor) -> None:
    if flag.kind is FlagKind.BOOLEAN:
        parser.add_argument(
            *flag.option_strings,
            dest=flag.dest,
            action="store_true",
            default=flag.default,
            help=flag.usage,
        )
        return
    parser.add_argument(
        *flag.option_strings,
        dest=flag.dest,
        type=_FLAG_TYPES[flag.kind],
        default=flag.default,
        metavar="value",
        help=flag.usage,
    )


def _build_parser(descriptor: ApplicationDescriptor) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=descriptor.name,
        description=descriptor.usage,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", dest="show_help", action="store_true")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {descriptor.version}",
    )
    for flag in descriptor.global_flags:
        _add_flag(parser, flag)
    return parser


def _build_command_parser(
    descriptor: ApplicationDescriptor,
    command: CommandDescriptor,
) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=f"{descriptor.name} {command.name}",
        description=command.usage,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", dest="show_help", action="store_true")
    for flag in command.flags:
        _add_flag(parser, flag)
    parser.add_argument("arguments", nargs="*")
    return parser


def split_argv(
    descriptor: ApplicationDescriptor,
    argv: Sequence[str],
) -> tuple[list[str], list[str]]:
    """Split *argv* into (global option tokens, command tokens)."""
    takes_value = {
        spelling
        for flag in descriptor.global_flags
        if flag.kind is not FlagKind.BOOLEAN
        for spelling in flag.option_strings
    }
    tokens = list(argv)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "--":
            return tokens[:index], tokens[index + 1:]
        if token == "-" or not token.startswith("-"):
            return tokens[:index], tokens[index:]
        index += 2 if token in takes_value else 1
    return tokens, []


def _flag_values(
    flags: Sequence[FlagDescriptor],
    namespace: argparse.Namespace,
) -> dict[str, Any]:
    return {flag.name: getattr(namespace, flag.dest) for flag in flags}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _default_action(descriptor: ApplicationDescriptor) -> int:
    action = descriptor.default_action or show_help
    return action(descriptor)


def run(descriptor: ApplicationDescriptor, argv: Sequence[str]) -> int:
    """Parse *argv* against *descriptor* and run exactly one action.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        For unknown options or malformed flag values.
    NidiError
        Whatever the selected command handler raises.
    """
    global_argv, command_argv = split_argv(descriptor, argv)
    namespace = _build_parser(descriptor).parse_args(global_argv)
    global_options = _flag_values(descriptor.global_flags, namespace)
    configure_logging(debug=bool(global_options.get("debug", False)))

    if namespace.show_help or not command_argv:
        logger.debug("No command given; running default action")
        return _default_action(descriptor)

    name, *rest = command_argv
    command = command_table(descriptor).get(name)
    if command is None:
        logger.debug("No command named %r; running default action", name)
        return _default_action(descriptor)

    command_namespace = _build_command_parser(descriptor, command).parse_intermixed_args(rest)
    if command_namespace.show_help:
        stdout.write(render_command_help(descriptor, command))
        return exit_codes.SUCCESS

    invocation = Invocation(
        application=descriptor,
        command=command,
        global_options=global_options,
        options=_flag_values(command.flags, command_namespace),
        arguments=tuple(command_namespace.arguments),
    )
    logger.debug("Dispatching to %r with %s", command.name, invocation.arguments)
    result = command.handler.execute(invocation)
    logger.debug("Command %r returned %r", command.name, result)
    return exit_codes.SUCCESS if result is None else result


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the nidi CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    descriptor = normalize(build())
    return run(descriptor, sys.argv[1:] if argv is None else argv)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def error_boundary(entry: Callable[[], int]) -> NoReturn:
    """Run *entry* and exit the process with a well-defined code.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    try:
        code = entry()
        sys.exit(code)
    except NidiError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)


def cli() -> None:
    """Top-level error boundary invoked by the ``nidi`` console script."""
    error_boundary(main)
