"""
CLI module for CAPO.

Provides the command-line interface using Click.
"""

from capo.cli.main import cli, main

__all__ = ["main", "cli"]
