"""Deterministic ordering of flags and commands for display.

Pure functions: they never mutate their input and do not depend on
registration order.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from nidi.core.models import ApplicationDescriptor, CommandDescriptor, FlagDescriptor


def sort_flags(flags: Iterable[FlagDescriptor]) -> tuple[FlagDescriptor, ...]:
    """Return *flags* sorted by name, ascending."""
    return tuple(sorted(flags, key=lambda flag: flag.name))


def sort_commands(
    commands: Iterable[CommandDescriptor],
) -> tuple[CommandDescriptor, ...]:
    """Return *commands* sorted by name, ascending."""
    return tuple(sorted(commands, key=lambda command: command.name))


def normalize(descriptor: ApplicationDescriptor) -> ApplicationDescriptor:
    """Return *descriptor* with global flags and commands sorted by name.

    Idempotent: ``normalize(normalize(d)) == normalize(d)``.  Command
    sub-flags are sorted as well so that per-command help is stable.
    """
    commands = tuple(
        dataclasses.replace(command, flags=sort_flags(command.flags))
        for command in sort_commands(descriptor.commands)
    )
    return dataclasses.replace(
        descriptor,
        global_flags=sort_flags(descriptor.global_flags),
        commands=commands,
    )
