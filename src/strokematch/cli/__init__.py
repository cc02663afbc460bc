"""Command-line interface for strokematch.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Outline inspection with resolved arc centers
- Per-gate match diagnostics
- Exit code reflecting the match verdict
"""

from strokematch.cli.app import cli, main

__all__ = ["cli", "main"]
