#!/usr/bin/env python3
# minishell/commands/errors.py
from __future__ import annotations

"""
Parse and validation errors for commands.

Every error carries the data needed to render a precise message:
- UnknownCommand: the name that did not resolve.
- UnsupportedFlag: the first flag the command kind rejected.
- WrongArgumentsCount: the expected constraint and the observed count.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minishell.commands.command_types import ArgumentCount


class CommandError(Exception):
    """Base class for anything that stops a line from becoming a Command."""


class UnknownCommand(CommandError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown command: {self.name}"


class UnsupportedFlag(CommandError):
    def __init__(self, flag: str) -> None:
        super().__init__(flag)
        self.flag = flag

    def __str__(self) -> str:
        return f"Unsupported flag: {self.flag}"


class WrongArgumentsCount(CommandError):
    def __init__(self, expected: ArgumentCount, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"Wrong number of arguments: expected {self.expected}, got {self.actual}"
