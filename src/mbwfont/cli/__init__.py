"""Command-line interface for mbwfont.

This module provides the CLI using Typer with rich output for
inspecting, sorting and creating MBW1 font files.
"""

from mbwfont.cli.app import app, cli

__all__ = ["app", "cli"]
