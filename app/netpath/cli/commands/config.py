"""Config command implementation.

Shows the effective settings and writes a default config file.
"""

import json
from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from netpath.cli.types import OutputFormat, load_cli_config
from netpath.config import ConfigError, NetpathConfig, config_to_dict, save_config
from netpath.core.paths import get_config_path
from netpath.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the netpath configuration.",
    no_args_is_help=True,
)


@app.command()
def show(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table (TOML) or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the effective configuration."""
    config = load_cli_config(ctx)
    data = config_to_dict(config)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(data))
        return

    path = _config_path(ctx)
    source = str(path) if path.exists() else "defaults"
    console.print(f"[dim]# source: {source}[/dim]")
    console.print(tomli_w.dumps(data), markup=False, highlight=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    configured: Path | None = (ctx.obj or {}).get("config_path")
    path = configured or get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(NetpathConfig(), configured)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


def _config_path(ctx: typer.Context) -> Path:
    configured: Path | None = (ctx.obj or {}).get("config_path")
    return configured or get_config_path()
