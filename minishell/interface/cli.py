#!/usr/bin/env python3
# minishell/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order (FRONTEND=auto):
    1) prompt_toolkit (rich completion + history)
    2) readline (basic completion + history)
    3) plain input (last resort)
"""

import logging
from pathlib import Path
from typing import Optional

from minishell.config import AppConfig
from minishell.interface.completion import _split_current_token, suggest

logger = logging.getLogger(__name__)


class BaseCLI:
    """
    Plain `input()` frontend and base interface for the others.

    Subclasses override:
        - setup()
        - get_line()
        - teardown()

    Context manager support guarantees teardown.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def setup(self) -> None:
        ...

    def get_line(self) -> str:
        return input(self.config.prompt)

    def teardown(self) -> None:
        ...

    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


def _touch_history(path: Path | None) -> Path | None:
    """Ensure the history file exists; return None when it cannot be created."""
    if path is None:
        return None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
    except OSError as exc:
        logger.warning("History disabled, cannot create %s: %s", path, exc)
        return None
    return path


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Line editor with history and live completion."""

    def __init__(self, config: AppConfig) -> None:
        super().__init__(config)
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion
        from prompt_toolkit.history import FileHistory, InMemoryHistory

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                _, current_prefix = _split_current_token(text_before_cursor)
                for word in suggest(text_before_cursor):
                    # replace exactly the current token
                    yield Completion(word, start_position=-len(current_prefix))

        history_path = _touch_history(config.history_file_path)
        history = FileHistory(str(history_path)) if history_path else InMemoryHistory()
        self._session = PromptSession(
            history=history,
            completer=_Completer() if config.enable_completion else None,
            complete_while_typing=config.enable_completion,
        )

    def get_line(self) -> str:
        return self._session.prompt(self.config.prompt)


# ===== Fallback: readline =====
class ReadlineCLI(BaseCLI):
    """Fallback editor with basic completion and history."""

    def __init__(self, config: AppConfig) -> None:
        super().__init__(config)
        import readline

        self.readline = readline
        self._history_path: Path | None = None

    def setup(self) -> None:
        self._history_path = _touch_history(self.config.history_file_path)
        if self._history_path is not None:
            try:
                self.readline.read_history_file(str(self._history_path))
            except OSError as exc:
                logger.debug("Could not read history: %s", exc)

        if not self.config.enable_completion:
            return

        self.readline.set_completer_delims(" \t\n")

        def _complete(text_fragment: str, state_index: int) -> Optional[str]:
            buffer_text = self.readline.get_line_buffer()
            fragment = text_fragment.replace('"', '')
            matches = [w for w in suggest(buffer_text) if w.replace('"', '').startswith(fragment)]
            return matches[state_index] if state_index < len(matches) else None

        self.readline.set_completer(_complete)
        self.readline.parse_and_bind("tab: complete")

    def teardown(self) -> None:
        if self._history_path is None:
            return
        try:
            self.readline.write_history_file(str(self._history_path))
        except OSError as exc:
            logger.debug("Could not write history: %s", exc)


def make_cli(config: AppConfig) -> BaseCLI:
    """
    Select the input frontend named by config.frontend, or the best available one.
    """
    if config.frontend == "plain":
        return BaseCLI(config)
    if config.frontend == "prompt_toolkit":
        return PromptToolkitCLI(config)
    if config.frontend == "readline":
        return ReadlineCLI(config)

    try:
        return PromptToolkitCLI(config)
    except Exception as exc:  # noqa: BLE001
        logger.debug("prompt_toolkit unavailable: %s", exc)
    try:
        return ReadlineCLI(config)
    except ImportError as exc:
        logger.debug("readline unavailable: %s", exc)
    return BaseCLI(config)
