#!/usr/bin/env python3
# minishell/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface.

Provides:
- Tokenizer and command parser.
- Line handler with error rendering.
- Completion helpers.
- CLI frontends with history and completion (prompt_toolkit / readline / plain).
"""


# Parser FIRST (everything else depends on it)
from .parser import tokenize, partition_tokens, parse_command, is_flag

# Completion
from .completion import suggest

# Line handler
from .handler import handle_line, format_command_error, format_execution_error

# CLI frontends
from .cli import BaseCLI, PromptToolkitCLI, ReadlineCLI, make_cli

__all__ = [
    # parser
    "tokenize",
    "partition_tokens",
    "parse_command",
    "is_flag",
    # completion
    "suggest",
    # handler
    "handle_line",
    "format_command_error",
    "format_execution_error",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "ReadlineCLI",
    "make_cli",
]
