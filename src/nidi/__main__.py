"""Allow ``python -m nidi`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m nidi`` behaves identically to the ``nidi`` console script.
"""

from __future__ import annotations

from nidi.cli.app import cli

if __name__ == "__main__":
    cli()
