#!/usr/bin/env python3
# minishell/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

Token-aware suggestions for:
- First token: command names.
- Flag tokens: the flags the resolved command kind supports.
- 'ls' arguments: entries of the directory named by the current prefix.
"""

import logging
import os

from minishell.commands import CommandError, CommandKind
from minishell.interface.parser import is_flag, tokenize

logger = logging.getLogger(__name__)


def _split_current_token(raw_input: str) -> tuple[list[str], str]:
    """
    Return (parts, current_prefix).

    Uses the shell tokenizer, which always emits the trailing buffer, so a
    trailing space yields an empty current prefix.
    """
    if not raw_input:
        return [], ""
    parts = tokenize(raw_input)
    return parts, parts[-1]


def _complete_path(prefix: str, cwd: str | None = None) -> list[str]:
    """Suggest directory entries matching `prefix`; directories end with '/'."""
    head, tail = os.path.split(prefix)
    base = os.path.join(cwd or os.curdir, head) if head else (cwd or os.curdir)

    try:
        with os.scandir(base) as it:
            entries = [(e.name, e.is_dir()) for e in it]
    except OSError as exc:
        logger.debug("Path completion failed for %r: %s", base, exc)
        return []

    out: list[str] = []
    for name, is_dir in entries:
        if not name.startswith(tail):
            continue
        if name.startswith(".") and not tail.startswith("."):
            continue
        candidate = os.path.join(head, name) if head else name
        if is_dir:
            candidate += "/"
        # the tokenizer splits on unquoted spaces
        out.append(f"\"{candidate}\"" if " " in candidate else candidate)
    return sorted(out)


def suggest(text_before_cursor: str, *, cwd: str | None = None) -> list[str]:
    """
    Produce suggestions based on the current buffer content.

    Strategy:
      1) If entering the first token, suggest command names.
      2) If the current token is a flag, suggest the command's supported flags.
      3) For 'ls', suggest filesystem entries relative to `cwd`.
    """
    raw_buffer = text_before_cursor.lstrip()
    parts, current_prefix = _split_current_token(raw_buffer)

    if len(parts) <= 1:
        return sorted(n for n in CommandKind.names() if n.startswith(current_prefix))

    try:
        kind = CommandKind.from_name(parts[0])
    except CommandError:
        return []

    if is_flag(current_prefix):
        return sorted(f for f in kind.supported_flags if f.startswith(current_prefix))

    if kind is CommandKind.LIST_DIRECTORY:
        return _complete_path(current_prefix, cwd)

    return []
