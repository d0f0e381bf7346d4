"""CLI commands for folderops.

This package contains all subcommand implementations.
"""

from folderops.cli.commands import clear, clone, config

__all__ = ["clear", "clone", "config"]
