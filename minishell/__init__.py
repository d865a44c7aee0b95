#!/usr/bin/env python3
# minishell/__init__.py
from __future__ import annotations

"""
A minimal interactive shell: echo, exit, help and ls, with quote-aware
tokenizing and per-command flag and argument-count validation.
"""

__version__ = "0.1.0"
