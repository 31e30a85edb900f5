"""Core layer: descriptors, ordering and help rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or process I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from nidi.core.help import render_command_help, render_help
from nidi.core.models import (
    ApplicationDescriptor,
    CommandDescriptor,
    FlagDescriptor,
    FlagKind,
    Invocation,
)
from nidi.core.ordering import normalize, sort_commands, sort_flags
from nidi.core.protocols import CommandHandler

__all__: list[str] = [
    "ApplicationDescriptor",
    "CommandDescriptor",
    "CommandHandler",
    "FlagDescriptor",
    "FlagKind",
    "Invocation",
    "normalize",
    "render_command_help",
    "render_help",
    "sort_commands",
    "sort_flags",
]
