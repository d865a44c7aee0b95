#!/usr/bin/env python3
# minishell/interface/handler.py
from __future__ import annotations

"""
Handling of a single input line at the loop boundary.

Parse errors are rendered with their own message (plus a close-match hint
for unknown commands). Errors raised while executing are rendered as
'An error occurred: ...'. Neither stops the loop.
"""

import difflib
import logging
from typing import TextIO

from minishell.commands import (
    CommandError,
    CommandKind,
    CommandResult,
    UnknownCommand,
    execute,
)
from minishell.interface.parser import parse_command

logger = logging.getLogger(__name__)

EXECUTION_ERROR_PREFIX = "An error occurred"


def _suggest_similar_names(name: str) -> str:
    """Return a short suggestion string for misspelled commands."""
    if not name:
        return ""
    matches = difflib.get_close_matches(name, CommandKind.names(), n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(matches)}?" if matches else ""


def format_command_error(error: CommandError) -> str:
    """Render a parse/validation error for the user."""
    if isinstance(error, UnknownCommand):
        hint = _suggest_similar_names(error.name)
        return f"{error}.{hint}" if hint else str(error)
    return str(error)


def format_execution_error(error: Exception) -> str:
    message = str(error) or type(error).__name__
    return f"{EXECUTION_ERROR_PREFIX}: {message}"


def handle_line(input_line: str, *, stdout: TextIO | None = None) -> CommandResult:
    """
    Parse and execute one input line.

    Blank lines are ignored. The returned result carries the outcome for the
    loop and, on failure, the message to show. Command output has already
    been written to `stdout` when this returns.
    """
    line = input_line.strip()
    if not line:
        return CommandResult()

    try:
        command = parse_command(line)
    except CommandError as exc:
        logger.debug("Rejected %r: %r", line, exc)
        return CommandResult(error=format_command_error(exc))

    try:
        return execute(command, stdout=stdout)
    except Exception as exc:
        logger.debug("Command %r failed", line, exc_info=True)
        return CommandResult(error=format_execution_error(exc))
