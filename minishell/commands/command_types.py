#!/usr/bin/env python3
# minishell/commands/command_types.py
from __future__ import annotations

"""
Command data structures and the static rule table.

This module defines:
- ArgumentCount constraints (Exact, AtLeast, AtMost, Range).
- CommandKind: the closed set of verbs the shell understands.
- CommandRule / COMMAND_RULES: per-kind supported flags and argument count.
- Command: a validated, immutable command ready to execute.
- CommandResult / Outcome: what an executed command hands back to the loop.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from minishell.commands.errors import UnknownCommand, UnsupportedFlag, WrongArgumentsCount


# ---------------------------------------------------------------------------
# Argument count constraints
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Exact:
    count: int

    def is_satisfied_by(self, count: int) -> bool:
        return count == self.count

    def __str__(self) -> str:
        return f"exactly {self.count}"


@dataclass(frozen=True, slots=True)
class AtLeast:
    minimum: int

    def is_satisfied_by(self, count: int) -> bool:
        return count >= self.minimum

    def __str__(self) -> str:
        return f"at least {self.minimum}"


@dataclass(frozen=True, slots=True)
class AtMost:
    maximum: int

    def is_satisfied_by(self, count: int) -> bool:
        return count <= self.maximum

    def __str__(self) -> str:
        return f"up to {self.maximum}"


@dataclass(frozen=True, slots=True)
class Range:
    """Closed interval [minimum, maximum]."""
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"Range minimum {self.minimum} exceeds maximum {self.maximum}")

    def is_satisfied_by(self, count: int) -> bool:
        return self.minimum <= count <= self.maximum

    def __str__(self) -> str:
        return f"{self.minimum}-{self.maximum}"


ArgumentCount = Union[Exact, AtLeast, AtMost, Range]


# ---------------------------------------------------------------------------
# Command kinds and their rules
# ---------------------------------------------------------------------------

class CommandKind(Enum):
    """Closed enumeration of built-in verbs. The value is the typed name."""

    ECHO = "echo"
    EXIT = "exit"
    HELP = "help"
    LIST_DIRECTORY = "ls"

    @classmethod
    def from_name(cls, name: str) -> CommandKind:
        """Resolve a command name by exact, case-sensitive match."""
        for kind in cls:
            if kind.value == name:
                return kind
        raise UnknownCommand(name)

    @classmethod
    def names(cls) -> list[str]:
        return [kind.value for kind in cls]

    @property
    def rule(self) -> CommandRule:
        return COMMAND_RULES[self]

    @property
    def supported_flags(self) -> frozenset[str]:
        return self.rule.supported_flags

    @property
    def expected_arguments(self) -> ArgumentCount | None:
        return self.rule.expected_arguments

    def is_supported_flag(self, flag: str) -> bool:
        return flag in self.rule.supported_flags


@dataclass(frozen=True, slots=True)
class CommandRule:
    """
    Static validation rules for one command kind.

    Attributes:
        supported_flags: Flag tokens (leading '-') the kind accepts.
        expected_arguments: Positional argument constraint; None accepts any count.
    """
    supported_flags: frozenset[str] = frozenset()
    expected_arguments: ArgumentCount | None = None


# '-u' on echo is accepted and currently has no effect.
COMMAND_RULES: Mapping[CommandKind, CommandRule] = MappingProxyType({
    CommandKind.ECHO: CommandRule(
        supported_flags=frozenset({"-u"}),
        expected_arguments=AtLeast(1),
    ),
    CommandKind.EXIT: CommandRule(
        expected_arguments=Exact(0),
    ),
    CommandKind.HELP: CommandRule(
        expected_arguments=Exact(0),
    ),
    CommandKind.LIST_DIRECTORY: CommandRule(
        expected_arguments=None,
    ),
})


# ---------------------------------------------------------------------------
# Validated command and execution result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """
    A validated command. Construct through Command.create so the rules hold.

    Important fields:
        kind: Resolved command kind.
        arguments: Positional arguments in input order.
        flags: Flags given on the line (order irrelevant).
    """

    kind: CommandKind
    arguments: tuple[str, ...] = ()
    flags: frozenset[str] = frozenset()

    @classmethod
    def create(
        cls,
        kind: CommandKind,
        arguments: Iterable[str] = (),
        flags: Iterable[str] = (),
    ) -> Command:
        """
        Validate and build a Command.

        Flags are checked in the given order and the first unsupported one
        raises UnsupportedFlag. The argument count is checked afterwards.
        """
        arguments = tuple(arguments)
        flags = list(flags)

        for flag in flags:
            if not kind.is_supported_flag(flag):
                raise UnsupportedFlag(flag)

        expected = kind.expected_arguments
        if expected is not None and not expected.is_satisfied_by(len(arguments)):
            raise WrongArgumentsCount(expected=expected, actual=len(arguments))

        return cls(kind=kind, arguments=arguments, flags=frozenset(flags))

    @property
    def name(self) -> str:
        return self.kind.value


class Outcome(Enum):
    """What the loop should do once a command has run."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


@dataclass(slots=True)
class CommandResult:
    """
    Result of executing a command.

    Attributes:
        outcome: CONTINUE to read the next line, TERMINATE to leave the loop.
        lines: Lines written to the output stream, in order.
        error: User-facing error message when the line failed, else None.
    """
    outcome: Outcome = Outcome.CONTINUE
    lines: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def should_terminate(self) -> bool:
        return self.outcome is Outcome.TERMINATE
