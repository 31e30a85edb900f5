"""Custom exception hierarchy for nidi.

Every error that reaches the process boundary must be a
:class:`NidiError` subclass so that the CLI error boundary can render a
clean message instead of a stack trace.

Hierarchy
---------
NidiError
├── UsageError
├── DuplicateNameError
├── CommandFailedError
└── ConfigurationError
    └── CompletionsWriteError
"""

from __future__ import annotations


class NidiError(Exception):
    """Base exception for all nidi errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class UsageError(NidiError):
    """Raised when argv contains an unknown option or a malformed flag value."""


# --- Descriptor construction -----------------------------------------------

class DuplicateNameError(NidiError):
    """Raised when two commands (or two flags of one command) share a name."""


# --- Command execution -----------------------------------------------------

class CommandFailedError(NidiError):
    """Raised by a command handler to report a failed run."""


# --- Environment / configuration -------------------------------------------

class ConfigurationError(NidiError):
    """Raised when a required environment setting is missing or invalid."""


class CompletionsWriteError(ConfigurationError):
    """Raised when the shell completions file cannot be written."""


def append_help_suggestion(hint: str | None, prog: str = "nidi") -> str:
    """Append a pointer to ``<prog> --help`` to an existing hint.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = f"Run '{prog} --help'"
    if hint and marker in hint:
        return hint
    suggestion = f"{marker} to see the available flags and commands."
    if not hint:
        return suggestion
    return "\n".join((hint, suggestion))
