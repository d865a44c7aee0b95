#!/usr/bin/env python3
# minishell/interface/parser.py
from __future__ import annotations

"""
Tokenizing and parsing of input lines into validated commands.

Responsibilities:
- Split a line on spaces, keeping double-quoted spans together.
- Partition the tokens after the command name into arguments and flags.
- Resolve the command kind and validate the result against its rules.
"""

from minishell.commands import Command, CommandKind

QUOTE = '"'
FLAG_PREFIX = "-"


def tokenize(command_line: str, delimiter: str = " ") -> list[str]:
    """
    Split a raw command line into tokens outside double quotes.

    Quote characters toggle quoting and are dropped. Repeated delimiters do
    not produce empty tokens, but the trailing buffer is always emitted, so
    an empty line yields [""]. Unterminated quotes run to the end of the line.
    """
    tokens: list[str] = []
    current: list[str] = []
    inside_quotes = False

    for char in command_line:
        if char == QUOTE:
            inside_quotes = not inside_quotes
            continue

        if char == delimiter and not inside_quotes:
            if current:
                tokens.append("".join(current))
                current = []
            continue

        current.append(char)

    tokens.append("".join(current))
    return tokens


def is_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIX)


def partition_tokens(tokens: list[str]) -> tuple[list[str], list[str]]:
    """Split tokens into (arguments, flags), each in input order."""
    arguments: list[str] = []
    flags: list[str] = []
    for token in tokens:
        if is_flag(token):
            flags.append(token)
        else:
            arguments.append(token)
    return arguments, flags


def parse_command(command_line: str) -> Command:
    """
    Parse and validate a command line.

    Raises:
        UnknownCommand: the first token is not a known command name.
        UnsupportedFlag: the first flag the command kind does not accept.
        WrongArgumentsCount: the positional argument count breaks the kind's rule.
    """
    command_name, *arg_tokens = tokenize(command_line)
    kind = CommandKind.from_name(command_name)
    arguments, flags = partition_tokens(arg_tokens)
    return Command.create(kind, arguments, flags)
