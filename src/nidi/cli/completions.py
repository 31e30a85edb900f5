"""``nidi-generate-completions``: zsh completion script generator.

Renders a ``#compdef`` script from the same normalised descriptor the
``nidi`` binary dispatches on, and writes it to ``$OUT_DIR/_nidi``.
Intended for packaging and build scripts.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from nidi.cli import exit_codes
from nidi.cli.app import build, error_boundary
from nidi.cli.console import console
from nidi.core.help import HELP_ENTRY, VERSION_ENTRY
from nidi.core.models import ApplicationDescriptor, FlagDescriptor, FlagKind
from nidi.core.ordering import normalize
from nidi.exceptions import CompletionsWriteError, ConfigurationError

logger = logging.getLogger(__name__)

OUT_DIR_ENV = "OUT_DIR"


def _quote(text: str) -> str:
    """Escape *text* for use inside a single-quoted zsh word."""
    return text.replace("'", "'\\''")


def _describe_text(text: str) -> str:
    return _quote(text.replace("\\", "\\\\").replace("[", "\\[").replace("]", "\\]"))


def _flag_spec(flag: FlagDescriptor) -> str:
    description = _describe_text(flag.usage)
    suffix = "" if flag.kind is FlagKind.BOOLEAN else ":value: "
    spellings = flag.option_strings
    if len(spellings) == 1:
        return f"'{spellings[0]}[{description}]{suffix}'"
    exclusion = " ".join(spellings)
    return f"'({exclusion})'{{{','.join(spellings)}}}'[{description}]{suffix}'"


def _arguments_block(specs: Sequence[str], indent: str) -> list[str]:
    lines = [f"{indent}_arguments -C \\"]
    lines.extend(f"{indent}  {spec} \\" for spec in specs[:-1])
    lines.append(f"{indent}  {specs[-1]}")
    return lines


def render_zsh_completions(descriptor: ApplicationDescriptor) -> str:
    """Render a zsh completion script for *descriptor*."""
    descriptor = normalize(descriptor)
    function = f"_{descriptor.name}"

    global_specs = [_flag_spec(flag) for flag in descriptor.global_flags]
    global_specs.append(f"'(-h --help)'{{-h,--help}}'[{HELP_ENTRY[1]}]'")
    global_specs.append(f"'{VERSION_ENTRY[0]}[{VERSION_ENTRY[1]}]'")
    global_specs.extend(["'1: :->command'", "'*:: :->args'"])

    lines = [f"#compdef {descriptor.name}", "", f"{function}() {{", "  local -a commands"]
    lines.append("  commands=(")
    for command in descriptor.commands:
        name = command.name.replace(":", "\\:")
        entry = _quote(f"{name}:{command.usage}")
        lines.append(f"    '{entry}'")
    lines.extend(["  )", ""])
    lines.extend(_arguments_block(global_specs, "  "))
    lines.extend([
        "",
        "  case $state in",
        "    command)",
        f"      _describe -t commands '{descriptor.name} command' commands",
        "      ;;",
        "    args)",
        "      case $words[1] in",
    ])
    for command in descriptor.commands:
        specs = [_flag_spec(flag) for flag in command.flags]
        specs.append(f"'(-h --help)'{{-h,--help}}'[{HELP_ENTRY[1]}]'")
        specs.append("'*: :_files'")
        lines.append(f"        {command.name})")
        lines.extend(_arguments_block(specs, "          "))
        lines.append("          ;;")
    lines.extend([
        "      esac",
        "      ;;",
        "  esac",
        "}",
        "",
        f'{function} "$@"',
    ])
    return "\n".join(lines) + "\n"


def completions_path(environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the output file from ``$OUT_DIR``.

    Raises
    ------
    ConfigurationError
        When ``OUT_DIR`` is unset or empty.
    """
    env = os.environ if environ is None else environ
    out_dir = env.get(OUT_DIR_ENV, "")
    if not out_dir:
        raise ConfigurationError(
            f"{OUT_DIR_ENV} environment variable not set; aborting.",
            hint=f"Set {OUT_DIR_ENV} to the directory that should receive the script.",
        )
    directory = Path(out_dir)
    if not directory.is_absolute():
        directory = Path.cwd() / directory
    return directory / "_nidi"


def generate_completions(environ: Mapping[str, str] | None = None) -> int:
    """Write the zsh completion script and report where it went."""
    path = completions_path(environ)
    script = render_zsh_completions(build())
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(script, encoding="utf-8")
    except OSError as exc:
        raise CompletionsWriteError(f"Cannot write to file {path}: {exc.strerror}") from exc
    logger.debug("Wrote %d bytes of completions to %s", len(script), path)
    console.print("[bold green]Successfully generated zsh completions.[/bold green]")
    return exit_codes.SUCCESS


def cli() -> None:
    """Entry point for the ``nidi-generate-completions`` console script."""
    error_boundary(generate_completions)
