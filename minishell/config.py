#!/usr/bin/env python3
# minishell/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, config.toml
  3) Environment variables prefixed with MINISHELL_

Validation:
  - PROMPT: str (may be empty)
  - HISTORY_FILE_PATH / LOG_FILE_PATH: None or normalized path
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - ENABLE_COMPLETION / COLOR: bool
  - FRONTEND: one of {'auto','prompt_toolkit','readline','plain'}
"""

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

ENV_PREFIX = "MINISHELL_"

DEFAULTS: dict[str, Any] = {
    "PROMPT": "> ",
    "HISTORY_FILE_PATH": str(Path("~") / ".minishell_history"),
    "LOG_FILE_PATH": None,
    "LOG_LEVEL": "WARNING",
    "ENABLE_COMPLETION": True,
    "COLOR": True,
    "FRONTEND": "auto",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
FRONTENDS = {"auto", "prompt_toolkit", "readline", "plain"}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be coerced or validated."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


@dataclass(frozen=True, slots=True)
class AppConfig:
    prompt: str = DEFAULTS["PROMPT"]
    history_file_path: Path | None = field(
        default_factory=lambda: _as_opt_path(DEFAULTS["HISTORY_FILE_PATH"]))
    log_file_path: Path | None = None
    log_level: str = DEFAULTS["LOG_LEVEL"]
    enable_completion: bool = True
    color: bool = True
    frontend: str = "auto"

    # Unrecognized keys preserved for debugging
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if len(v) >= 2 and ((v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"'))):
            v = v[1:-1]
        out[k] = v
    return out


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path.name, f"invalid TOML ({exc})") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested tables to UPPER_SNAKE keys.
    Example: {'log': {'level': 'debug'}} -> {'LOG_LEVEL': 'debug'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[key.upper()] = v
    return flat


def _strip_prefix(d: Mapping[str, Any]) -> dict[str, Any]:
    """Accept both 'PROMPT' and 'MINISHELL_PROMPT' spellings in files."""
    out: dict[str, Any] = {}
    for k, v in d.items():
        key = str(k).upper()
        if key.startswith(ENV_PREFIX):
            key = key[len(ENV_PREFIX):]
        out[key] = v
    return out


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(key: str, val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ConfigError(key, f"expected boolean, got {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_choice(key: str, val: Any, allowed: set[str], *, upper: bool = False) -> str:
    s = str(val).strip()
    s = s.upper() if upper else s.lower()
    if s not in allowed:
        raise ConfigError(key, f"must be one of {sorted(allowed)}, got {val!r}")
    return s


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    # expand both ~ and env vars
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


# ---------- merge & load ----------

def _merge_sources(cwd: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)
    merged.update(_strip_prefix(_load_env_file(cwd / ".env")))
    merged.update(_strip_prefix(_flatten_mapping(_load_toml_file(cwd / "config.toml"))))

    # Environment variables override all
    merged.update({k[len(ENV_PREFIX):]: v for k, v in environ.items()
                   if k.startswith(ENV_PREFIX)})
    return merged


def _validate_and_build(config: dict[str, Any]) -> AppConfig:
    prompt = config.get("PROMPT", DEFAULTS["PROMPT"])
    if not isinstance(prompt, str):
        raise ConfigError("PROMPT", f"expected string, got {prompt!r}")

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        prompt=prompt,
        history_file_path=_as_opt_path(config.get("HISTORY_FILE_PATH")),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH")),
        log_level=_as_choice("LOG_LEVEL", config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]),
                             LOG_LEVELS, upper=True),
        enable_completion=_as_bool("ENABLE_COMPLETION", config.get(
            "ENABLE_COMPLETION", DEFAULTS["ENABLE_COMPLETION"])),
        color=_as_bool("COLOR", config.get("COLOR", DEFAULTS["COLOR"])),
        frontend=_as_choice("FRONTEND", config.get("FRONTEND", DEFAULTS["FRONTEND"]),
                            FRONTENDS),
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects.
    """
    raw = _merge_sources(cwd or Path.cwd(), os.environ if environ is None else environ)
    return _validate_and_build(raw)


def default_config() -> AppConfig:
    """Configuration built from defaults only."""
    return _validate_and_build(dict(DEFAULTS))
