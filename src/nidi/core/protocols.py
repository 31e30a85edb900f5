"""Protocols (interfaces) consumed by the dispatcher.

Commands are pluggable collaborators: the dispatcher depends ONLY on
this contract, never on concrete command implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from nidi.core.models import Invocation


class CommandHandler(Protocol):
    """Contract for the object behind a :class:`CommandDescriptor`.

    Any object that implements :meth:`execute` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def execute(self, invocation: Invocation) -> int | None:
        """Run the command for *invocation*.

        Returns
        -------
        int | None
            Process exit code.  ``None`` is treated as success.

        Raises
        ------
        NidiError
            Any subclass; it propagates unchanged to the CLI error
            boundary.
        """
        ...  # pragma: no cover
