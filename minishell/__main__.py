#!/usr/bin/env python3
# minishell/__main__.py
from __future__ import annotations

from minishell.app import main

main()
