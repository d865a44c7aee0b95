#!/usr/bin/env python3
# minishell/ui/console.py
from __future__ import annotations

import sys
import threading
from typing import TextIO

from .ansi import colorize, enable_windows_vt

# Single shared print mutex for all console output (command output and logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file: TextIO | None = None, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def print_styled(
    text: str,
    *styles: str,
    enabled: bool = True,
    file: TextIO | None = None,
) -> None:
    """Print a line in the given ANSI styles when colour is enabled and the stream is a terminal."""
    stream = file if file is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    if enabled and isatty is not None and isatty() and enable_windows_vt():
        text = colorize(text, *styles)
    print_line(text, file=stream, flush=True)
