"""Shared pytest fixtures for minishell tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from minishell.config import AppConfig


@pytest.fixture
def plain_config() -> AppConfig:
    """Config with colour, completion and history off, for deterministic output."""
    return AppConfig(
        prompt="> ",
        history_file_path=None,
        log_file_path=None,
        enable_completion=False,
        color=False,
        frontend="plain",
    )


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Temporary directory with two subdirectories and a few files.

    Layout:
        alpha/  b.txt  a.txt
        beta/   z.txt
        notes.md
    """
    (tmp_path / "alpha").mkdir()
    (tmp_path / "alpha" / "b.txt").write_text("b")
    (tmp_path / "alpha" / "a.txt").write_text("a")
    (tmp_path / "beta").mkdir()
    (tmp_path / "beta" / "z.txt").write_text("z")
    (tmp_path / "notes.md").write_text("notes")
    return tmp_path


@pytest.fixture
def in_tree(tree: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the working directory set to `tree`."""
    monkeypatch.chdir(tree)
    return tree
