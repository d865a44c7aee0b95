#!/usr/bin/env python3
# minishell/commands/__init__.py
from __future__ import annotations

"""
Package for command types, validation rules, and execution.

Provides:
- Data structures (`Command`, `CommandKind`, `CommandResult`, `Outcome`).
- Argument count constraints (`Exact`, `AtLeast`, `AtMost`, `Range`).
- The static rule table (`COMMAND_RULES`).
- The error hierarchy (`CommandError` and subclasses).
- The action table and dispatcher (`ACTIONS`, `execute`).
"""


from .errors import CommandError, UnknownCommand, UnsupportedFlag, WrongArgumentsCount
from .command_types import (
    ArgumentCount,
    AtLeast,
    AtMost,
    Command,
    CommandKind,
    CommandResult,
    CommandRule,
    COMMAND_RULES,
    Exact,
    Outcome,
    Range,
)
from .builtins import ACTIONS, HELP_PLACEHOLDER, action, execute

__all__ = [
    # errors
    "CommandError",
    "UnknownCommand",
    "UnsupportedFlag",
    "WrongArgumentsCount",
    # types
    "ArgumentCount",
    "AtLeast",
    "AtMost",
    "Command",
    "CommandKind",
    "CommandResult",
    "CommandRule",
    "COMMAND_RULES",
    "Exact",
    "Outcome",
    "Range",
    # execution
    "ACTIONS",
    "HELP_PLACEHOLDER",
    "action",
    "execute",
]
