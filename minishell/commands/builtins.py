#!/usr/bin/env python3
# minishell/commands/builtins.py
from __future__ import annotations

"""
Built-in command actions and the execution dispatcher.

Each CommandKind maps to exactly one action, registered with @action.
Actions write through an `emit` callable and may return Outcome.TERMINATE;
they never end the process themselves.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Optional, TextIO

from minishell.commands.command_types import Command, CommandKind, CommandResult, Outcome
from minishell.ui import print_line

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]
Action = Callable[[Command, Emit], Optional[Outcome]]

HELP_PLACEHOLDER = "Help is not implemented yet"

# Kind -> action callable
ACTIONS: Dict[CommandKind, Action] = {}


def action(kind: CommandKind) -> Callable[[Action], Action]:
    """Decorator registering the function as the action for `kind`."""

    def wrapper(func: Action) -> Action:
        if kind in ACTIONS:
            raise ValueError(f"Action for '{kind.value}' already registered.")
        ACTIONS[kind] = func
        return func

    return wrapper


# ----------------------- actions -----------------------

@action(CommandKind.ECHO)
def echo_cmd(command: Command, emit: Emit) -> None:
    """Print all positional arguments, one per line."""
    emit("\n".join(command.arguments))


@action(CommandKind.EXIT)
def exit_cmd(command: Command, emit: Emit) -> Outcome:
    return Outcome.TERMINATE


@action(CommandKind.HELP)
def help_cmd(command: Command, emit: Emit) -> None:
    emit(HELP_PLACEHOLDER)


@action(CommandKind.LIST_DIRECTORY)
def ls_cmd(command: Command, emit: Emit) -> None:
    """
    List the immediate entries of each directory argument (default '.').

    Missing paths and non-directories get a one-line diagnostic and are
    skipped. With several arguments each listing is framed by a '<path>:'
    header and a blank line. OSError from enumeration propagates.
    """
    targets = list(command.arguments) or ["."]
    framed = len(targets) > 1

    for raw in targets:
        directory = Path(raw)
        # Path("") means ".", but an empty argument names nothing.
        if not raw or not directory.exists():
            emit(f"Directory {raw} does not exist")
            continue
        if not directory.is_dir():
            emit(f"{raw} is not a directory")
            continue

        entries = sorted(entry.name for entry in directory.iterdir())

        if framed:
            emit(f"{raw}:")
        for name in entries:
            emit(os.path.join(raw, name))
        if framed:
            emit("")


# Every kind must be executable.
_missing = set(CommandKind) - set(ACTIONS)
if _missing:
    raise RuntimeError(
        f"No action registered for: {', '.join(sorted(k.value for k in _missing))}")


# ----------------------- dispatcher -----------------------

def execute(command: Command, *, stdout: TextIO | None = None) -> CommandResult:
    """
    Run the action for `command.kind`, writing its output line by line.

    Returns a CommandResult holding the emitted lines and whether the loop
    should terminate. Exceptions raised by the action propagate.
    """
    result = CommandResult()

    def emit(line: str) -> None:
        print_line(line, file=stdout)
        result.lines.append(line)

    logger.debug("Executing %s args=%r flags=%r", command.name,
                 command.arguments, sorted(command.flags))
    outcome = ACTIONS[command.kind](command, emit)
    if outcome is not None:
        result.outcome = outcome
    return result
