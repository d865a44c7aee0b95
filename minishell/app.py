#!/usr/bin/env python3
# minishell/app.py
from __future__ import annotations

"""
Startup and the read-evaluate-print loop.

Boot:
- Load configuration (falls back to defaults on invalid values).
- Initialize the logger.
- Select the input frontend.

Loop:
- Read a line, handle it, print any error, stop on the exit outcome or EOF.
"""

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from minishell.config import AppConfig, ConfigError, default_config, load_config
from minishell.interface import BaseCLI, handle_line, make_cli
from minishell.ui import init_logger, print_line, print_styled


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    cli: BaseCLI


def boot() -> BootState:
    """Load config, set up logging, and pick the input frontend."""
    config_error: ConfigError | None = None
    try:
        config = load_config()
    except ConfigError as exc:
        config_error = exc
        config = default_config()

    logger = init_logger("minishell", level=config.log_level,
                         logfile=config.log_file_path)
    if config_error is not None:
        print_styled(f"[ WARN ] Invalid configuration, using defaults: {config_error}",
                     "yellow", enabled=config.color, file=sys.stderr)
        logger.debug("Configuration rejected", exc_info=config_error)

    cli = make_cli(config)
    logger.debug("Using %s frontend", type(cli).__name__)
    return BootState(config=config, logger=logger, cli=cli)


def run_loop(cli: BaseCLI, config: AppConfig, *, stdout: TextIO | None = None) -> int:
    """
    Read and handle lines until the exit command or end of input.

    Ctrl-C abandons the current line. Returns the process exit status.
    """
    while True:
        try:
            line = cli.get_line()
        except KeyboardInterrupt:
            continue
        except EOFError:
            print_line(file=stdout)
            return 0

        result = handle_line(line, stdout=stdout)
        if result.error is not None:
            print_styled(result.error, "red", enabled=config.color, file=stdout)
        if result.should_terminate:
            return 0


def main() -> None:
    state = boot()
    with state.cli as cli:
        status = run_loop(cli, state.config)
    sys.exit(status)


if __name__ == "__main__":
    main()
