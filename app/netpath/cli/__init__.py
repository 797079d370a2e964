"""CLI package for netpath.

This package contains the Typer application and all subcommands.
"""

from netpath.cli.main import app

__all__ = ["app"]
