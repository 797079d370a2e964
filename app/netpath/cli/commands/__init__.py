"""CLI commands for netpath.

This package contains all subcommand implementations.
"""

from netpath.cli.commands import config, connect, inspect, mounts

__all__ = ["config", "connect", "inspect", "mounts"]
