"""Tests for configuration loading, precedence and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from minishell.config import AppConfig, ConfigError, default_config, load_config


class TestDefaults:
    def test_default_values(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path, environ={})
        assert config.prompt == "> "
        assert config.log_level == "WARNING"
        assert config.log_file_path is None
        assert config.enable_completion is True
        assert config.color is True
        assert config.frontend == "auto"
        assert config.history_file_path == (Path.home() / ".minishell_history").resolve()

    def test_default_config_matches_empty_sources(self, tmp_path: Path) -> None:
        assert default_config() == load_config(cwd=tmp_path, environ={})

    def test_dataclass_defaults_match_default_config(self) -> None:
        assert AppConfig() == default_config()


class TestPrecedence:
    def test_toml_file(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text(
            'prompt = "$ "\ncolor = false\n\n[log]\nlevel = "debug"\n'
        )
        config = load_config(cwd=tmp_path, environ={})
        assert config.prompt == "$ "
        assert config.color is False
        assert config.log_level == "DEBUG"

    def test_env_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text(
            '# comment\nMINISHELL_PROMPT="% "\nMINISHELL_ENABLE_COMPLETION=no\n'
        )
        config = load_config(cwd=tmp_path, environ={})
        assert config.prompt == "% "
        assert config.enable_completion is False

    def test_toml_overrides_env_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("PROMPT=env-file\n")
        (tmp_path / "config.toml").write_text('prompt = "toml"\n')
        assert load_config(cwd=tmp_path, environ={}).prompt == "toml"

    def test_environment_overrides_files(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text('frontend = "readline"\n')
        config = load_config(cwd=tmp_path, environ={"MINISHELL_FRONTEND": "plain"})
        assert config.frontend == "plain"

    def test_unprefixed_environment_is_ignored(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path, environ={"PROMPT": "x"}).prompt == "> "

    def test_history_can_be_disabled(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path, environ={"MINISHELL_HISTORY_FILE_PATH": "none"})
        assert config.history_file_path is None

    def test_log_file_path_is_resolved(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path, environ={
            "MINISHELL_LOG_FILE_PATH": str(tmp_path / "logs" / "shell.log")})
        assert config.log_file_path == (tmp_path / "logs" / "shell.log").resolve()

    def test_unknown_keys_kept_as_extra(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path, environ={"MINISHELL_THEME": "dark"})
        assert config.extra == {"THEME": "dark"}


class TestValidation:
    def test_bad_log_level(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(cwd=tmp_path, environ={"MINISHELL_LOG_LEVEL": "LOUD"})
        assert exc_info.value.key == "LOG_LEVEL"

    def test_bad_bool(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(cwd=tmp_path, environ={"MINISHELL_COLOR": "maybe"})
        assert exc_info.value.key == "COLOR"

    def test_bad_frontend(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(cwd=tmp_path, environ={"MINISHELL_FRONTEND": "curses"})

    def test_non_string_prompt(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text("prompt = 3\n")
        with pytest.raises(ConfigError):
            load_config(cwd=tmp_path, environ={})

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text("prompt = \n")
        with pytest.raises(ConfigError):
            load_config(cwd=tmp_path, environ={})

    def test_config_error_is_a_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)

    def test_app_config_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            AppConfig().prompt = "x"  # type: ignore[misc]
