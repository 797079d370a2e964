"""Shared types and helpers for CLI commands."""

from enum import Enum
from pathlib import Path

import typer

from netpath.config import ConfigError, NetpathConfig, load_config, load_config_or_default
from netpath.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def load_cli_config(ctx: typer.Context) -> NetpathConfig:
    """Load settings from the path given with ``--config`` or the default.

    A missing default file means defaults. Exits with code 1 when an
    explicit ``--config`` file is missing or any config file is invalid.
    """
    config_path: Path | None = (ctx.obj or {}).get("config_path")
    try:
        if config_path is not None:
            return load_config(config_path)
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
