"""Tests for CLI frontend selection and the plain frontend."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from minishell.config import AppConfig
from minishell.interface import cli as cli_module
from minishell.interface.cli import BaseCLI, ReadlineCLI, _touch_history, make_cli


class TestBaseCLI:
    def test_reads_with_configured_prompt(
        self, plain_config: AppConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        prompts: list[str] = []

        def _fake_input(prompt: str) -> str:
            prompts.append(prompt)
            return "echo hi"

        monkeypatch.setattr("builtins.input", _fake_input)
        assert BaseCLI(plain_config).get_line() == "echo hi"
        assert prompts == ["> "]

    def test_context_manager_calls_setup_and_teardown(self, plain_config: AppConfig) -> None:
        calls: list[str] = []

        class _Recording(BaseCLI):
            def setup(self) -> None:
                calls.append("setup")

            def teardown(self) -> None:
                calls.append("teardown")

        with _Recording(plain_config):
            calls.append("body")
        assert calls == ["setup", "body", "teardown"]


class TestMakeCli:
    def test_plain_frontend(self, plain_config: AppConfig) -> None:
        cli = make_cli(plain_config)
        assert type(cli) is BaseCLI

    def test_auto_falls_back_to_plain(
        self, plain_config: AppConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _fail(config):
            raise ImportError("not available")

        monkeypatch.setattr(cli_module, "PromptToolkitCLI", _fail)
        monkeypatch.setattr(cli_module, "ReadlineCLI", _fail)
        config = dataclasses.replace(plain_config, frontend="auto")
        assert type(make_cli(config)) is BaseCLI

    def test_auto_prefers_prompt_toolkit(
        self, plain_config: AppConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        class _FakePromptToolkit(BaseCLI):
            pass

        monkeypatch.setattr(cli_module, "PromptToolkitCLI", _FakePromptToolkit)
        config = dataclasses.replace(plain_config, frontend="auto")
        assert isinstance(make_cli(config), _FakePromptToolkit)


class TestTouchHistory:
    def test_none_disables_history(self) -> None:
        assert _touch_history(None) is None

    def test_creates_file_and_parents(self, tmp_path: Path) -> None:
        path = tmp_path / "state" / "history"
        assert _touch_history(path) == path
        assert path.exists()


class TestReadlineCLI:
    def test_history_round_trip(self, plain_config: AppConfig, tmp_path: Path) -> None:
        pytest.importorskip("readline")
        history = tmp_path / "history"
        config = dataclasses.replace(plain_config, history_file_path=history)
        with ReadlineCLI(config):
            pass
        assert history.exists()
