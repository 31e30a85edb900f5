"""Shared pytest fixtures and configuration for the nidi test suite.

Guidelines
----------
* No test touches the real OS configuration.
* Commands are fakes built from :class:`RecordingHandler`.
* Logging configuration is reset after every test.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator

import pytest

from nidi.cli.app import build
from nidi.core.models import (
    ApplicationDescriptor,
    CommandDescriptor,
    FlagDescriptor,
    FlagKind,
    Invocation,
)
from nidi.utils.log import LOGGER_NAME


class RecordingHandler:
    """Command handler that records every invocation it receives."""

    def __init__(self, result: int | None = None, error: BaseException | None = None) -> None:
        self.result = result
        self.error = error
        self.invocations: list[Invocation] = []

    def execute(self, invocation: Invocation) -> int | None:
        self.invocations.append(invocation)
        if self.error is not None:
            raise self.error
        return self.result


def make_command(
    name: str = "sync",
    *,
    usage: str = "Synchronise dotfiles",
    handler: RecordingHandler | None = None,
    flags: tuple[FlagDescriptor, ...] = (),
) -> CommandDescriptor:
    return CommandDescriptor(
        name=name,
        usage=usage,
        handler=handler or RecordingHandler(),
        flags=flags,
    )


def with_commands(*commands: CommandDescriptor) -> ApplicationDescriptor:
    """The built ``nidi`` descriptor with *commands* registered."""
    return dataclasses.replace(build(), commands=commands)


@pytest.fixture()
def sync_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture()
def sync_descriptor(sync_handler: RecordingHandler) -> ApplicationDescriptor:
    return with_commands(
        make_command(
            handler=sync_handler,
            flags=(
                FlagDescriptor(name="force", kind=FlagKind.BOOLEAN, usage="overwrite files"),
                FlagDescriptor(name="jobs", kind=FlagKind.NUMERIC, usage="parallel jobs", default=1),
            ),
        ),
    )


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
