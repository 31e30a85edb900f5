"""CLI console helpers built on Rich.

Two proxies are exposed: :data:`console` writes status and error
messages to stderr, :data:`stdout` writes command output (help text,
version) to stdout.  A fresh Rich console is created per call so that
output always targets the current ``sys`` streams.
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console(*, stderr: bool = False) -> Console:
    """Create a Rich console instance targeting stderr or stdout."""
    return Console(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy around a Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render *objects* with Rich markup enabled."""
        get_rich_console(stderr=self._stderr).print(*objects)

    def write(self, text: str) -> None:
        """Write *text* verbatim: no markup, no emoji codes, no wrapping."""
        get_rich_console(stderr=self._stderr).print(
            text,
            markup=False,
            emoji=False,
            soft_wrap=True,
            end="",
        )


console = _ConsoleProxy(stderr=True)
stdout = _ConsoleProxy(stderr=False)
