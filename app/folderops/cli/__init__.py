"""CLI package for folderops.

This package contains the Typer application and all subcommands.
"""

from folderops.cli.main import app

__all__ = ["app"]
