"""Registered command table.

Concrete configuration commands (package installation, dotfiles, ...)
plug in here as :class:`~nidi.core.models.CommandDescriptor` values.
None are implemented yet.
"""

from __future__ import annotations

from nidi.core.models import CommandDescriptor


def list_commands() -> tuple[CommandDescriptor, ...]:
    """Return every command the ``nidi`` binary exposes."""
    return ()
