"""
CLI module for fson.

Provides the command-line interface using Click.
"""

from fson.cli.main import cli, main

__all__ = ["main", "cli"]
