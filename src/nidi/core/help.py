"""Plain-text help rendering for an :class:`ApplicationDescriptor`.

Rendering is pure: it returns a string and never writes to a stream.
Flags and commands are sorted here as well, so the output order never
depends on how the descriptor was assembled.
"""

from __future__ import annotations

from collections.abc import Sequence

from nidi.core.models import (
    ApplicationDescriptor,
    CommandDescriptor,
    FlagDescriptor,
    FlagKind,
)
from nidi.core.ordering import sort_commands, sort_flags

INDENT = "   "
COLUMN_GAP = "  "

HELP_ENTRY: tuple[str, str] = ("--help, -h", "show help")
VERSION_ENTRY: tuple[str, str] = ("--version", "print the version")


def flag_label(flag: FlagDescriptor) -> str:
    """Return the left-hand column for *flag*, e.g. ``--level value, -l``."""
    spellings = list(flag.option_strings)
    if flag.kind is not FlagKind.BOOLEAN:
        spellings[0] = f"{spellings[0]} value"
    return ", ".join(spellings)


def flag_description(flag: FlagDescriptor) -> str:
    """Return the usage text of *flag* with its default appended."""
    if flag.kind is FlagKind.BOOLEAN:
        return f"{flag.usage} (default: {str(bool(flag.default)).lower()})"
    if flag.default is None:
        return flag.usage
    return f"{flag.usage} (default: {flag.default})"


def _table(rows: Sequence[tuple[str, str]]) -> list[str]:
    """Align *rows* into two columns."""
    if not rows:
        return []
    width = max(len(label) for label, _ in rows)
    return [
        f"{INDENT}{label.ljust(width)}{COLUMN_GAP}{text}".rstrip()
        for label, text in rows
    ]


def _command_rows(commands: Sequence[CommandDescriptor]) -> list[tuple[str, str]]:
    return [(command.name, command.usage) for command in sort_commands(commands)]


def _flag_rows(flags: Sequence[FlagDescriptor]) -> list[tuple[str, str]]:
    return [(flag_label(flag), flag_description(flag)) for flag in sort_flags(flags)]


def render_help(descriptor: ApplicationDescriptor) -> str:
    """Render the full application help text."""
    lines = [
        "NAME:",
        f"{INDENT}{descriptor.name} - {descriptor.usage}",
        "",
        "USAGE:",
        f"{INDENT}{descriptor.name} [global options] command [command options] [arguments...]",
        "",
        "VERSION:",
        f"{INDENT}{descriptor.version}",
        "",
    ]

    if descriptor.commands:
        lines.append("COMMANDS:")
        lines.extend(_table(_command_rows(descriptor.commands)))
        lines.append("")

    lines.append("GLOBAL OPTIONS:")
    rows = _flag_rows(descriptor.global_flags)
    rows.extend((HELP_ENTRY, VERSION_ENTRY))
    lines.extend(_table(rows))
    return "\n".join(lines) + "\n"


def render_command_help(
    descriptor: ApplicationDescriptor,
    command: CommandDescriptor,
) -> str:
    """Render help for a single command and its sub-flags."""
    lines = [
        "NAME:",
        f"{INDENT}{descriptor.name} {command.name} - {command.usage}",
        "",
        "USAGE:",
        f"{INDENT}{descriptor.name} {command.name} [command options] [arguments...]",
    ]
    if command.flags:
        lines.extend(["", "OPTIONS:"])
        lines.extend(_table(_flag_rows(command.flags)))
    return "\n".join(lines) + "\n"
