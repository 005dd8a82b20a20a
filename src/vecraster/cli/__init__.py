"""Command-line interface for vecraster.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- fill and stroke commands for JSON path files
- ASCII-art preview of the rendered grid
- Text or PBM file output
- Verbose/quiet output modes
"""

from vecraster.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
