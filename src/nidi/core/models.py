"""Descriptor models for the nidi dispatcher.

All models are **frozen** dataclasses: immutable value objects that
describe the application, its flags and its commands.  They carry zero
I/O and no dependency on the CLI layer.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nidi.core.protocols import CommandHandler


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

class FlagKind(enum.Enum):
    """Value kind accepted by a flag."""

    BOOLEAN = "boolean"
    STRING = "string"
    NUMERIC = "numeric"


@dataclass(frozen=True, slots=True)
class FlagDescriptor:
    """Metadata for a single command-line switch."""

    name: str
    """Long name, rendered as ``--<name>``."""

    kind: FlagKind
    """Value kind; booleans take no value on the command line."""

    usage: str
    """Human-readable description shown in help."""

    default: Any = None
    """Default value.  ``None`` for booleans is normalised to ``False``."""

    aliases: tuple[str, ...] = ()
    """Single-letter spellings, rendered as ``-<alias>``."""

    def __post_init__(self) -> None:
        if self.kind is FlagKind.BOOLEAN and self.default is None:
            object.__setattr__(self, "default", False)

    @property
    def option_strings(self) -> tuple[str, ...]:
        """All spellings of this flag, long form first."""
        return (f"--{self.name}", *(f"-{alias}" for alias in self.aliases))

    @property
    def dest(self) -> str:
        """Attribute name used for the parsed value."""
        return self.name.replace("-", "_")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """Metadata plus handler for a named subcommand."""

    name: str
    """Token the user types to select this command."""

    usage: str
    """One-line description shown in help."""

    handler: CommandHandler
    """Object executed when the command is selected."""

    flags: tuple[FlagDescriptor, ...] = ()
    """Sub-flags parsed after the command token."""


@dataclass(frozen=True, slots=True)
class Invocation:
    """Everything a command handler receives for one run."""

    application: ApplicationDescriptor
    command: CommandDescriptor
    global_options: dict[str, Any] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)
    arguments: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

def dedupe_flags(flags: Iterable[FlagDescriptor]) -> tuple[FlagDescriptor, ...]:
    """Drop flags whose name was already seen; the first one wins."""
    seen: set[str] = set()
    unique: list[FlagDescriptor] = []
    for flag in flags:
        if flag.name in seen:
            continue
        seen.add(flag.name)
        unique.append(flag)
    return tuple(unique)


@dataclass(frozen=True, slots=True)
class ApplicationDescriptor:
    """Top-level description of the CLI application.

    ``global_flags`` is deduplicated by name on construction.  Ordering
    is left as given; see :func:`nidi.core.ordering.normalize`.
    """

    name: str
    usage: str
    version: str
    global_flags: tuple[FlagDescriptor, ...] = ()
    commands: tuple[CommandDescriptor, ...] = ()
    default_action: Callable[[ApplicationDescriptor], int] | None = None
    """Invoked when no registered command matches argv."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "global_flags", dedupe_flags(self.global_flags))
        object.__setattr__(self, "commands", tuple(self.commands))
