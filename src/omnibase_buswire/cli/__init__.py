# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Command line interface (``buswire``)."""

from omnibase_buswire.cli.commands import cli, main

__all__: list[str] = ["cli", "main"]
