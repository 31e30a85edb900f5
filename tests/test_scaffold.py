"""Smoke tests: verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from nidi import __version__
from nidi.cli import exit_codes
from nidi.cli.app import main
from nidi.exceptions import (
    CommandFailedError,
    CompletionsWriteError,
    ConfigurationError,
    DuplicateNameError,
    NidiError,
    UsageError,
    append_help_suggestion,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            DuplicateNameError,
            CommandFailedError,
            ConfigurationError,
            CompletionsWriteError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[NidiError]
    ) -> None:
        assert issubclass(exc_class, NidiError)

    def test_completions_write_error_is_configuration_error(self) -> None:
        assert issubclass(CompletionsWriteError, ConfigurationError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(NidiError, Exception)

    def test_hint_is_stored(self) -> None:
        err = NidiError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = NidiError("boom")
        assert err.hint is None


class TestHelpSuggestion:
    def test_without_hint(self) -> None:
        assert append_help_suggestion(None) == (
            "Run 'nidi --help' to see the available flags and commands."
        )

    def test_appends_to_existing_hint(self) -> None:
        hint = append_help_suggestion("Check the flag value.")
        assert hint.splitlines()[0] == "Check the flag value."
        assert "Run 'nidi --help'" in hint

    def test_appended_only_once(self) -> None:
        once = append_help_suggestion("x")
        assert append_help_suggestion(once) == once

    def test_uses_given_prog(self) -> None:
        assert "Run 'nidi sync --help'" in append_help_suggestion(None, "nidi sync")


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "A CLI to config your laptop as code" in out
        assert "--debug" in out

    def test_unknown_command_returns_success(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([]) == exit_codes.SUCCESS
        no_args = capsys.readouterr()

        assert main(["bogus-command"]) == exit_codes.SUCCESS
        bogus = capsys.readouterr()

        assert bogus.out == no_args.out
        assert bogus.err == ""

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"nidi {__version__}"

    def test_unknown_option_is_usage_error(self) -> None:
        with pytest.raises(UsageError, match="unrecognized arguments: --bogus"):
            main(["--bogus"])
