"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from netpath import __version__
from netpath.cli.commands import config, connect, inspect, mounts
from netpath.utils.formatting import setup_logging

# Create main Typer app
app = typer.Typer(
    name="netpath",
    help="Classify paths as local, removable, remote or virtual storage.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"netpath version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log classification decisions to stderr.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of ~/.config/netpath/config.toml.",
        ),
    ] = None,
) -> None:
    """netpath - Classify the storage behind filesystem paths.

    Tells fixed disks from removable media, network shares (NFS, SMB,
    WebDAV, ...) and virtual filesystems, and checks whether a path is
    currently reachable.
    """
    setup_logging(verbose)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="inspect")(inspect.inspect_paths)
app.command(name="mounts")(mounts.list_mounts)
app.command(name="connect")(connect.connect_share)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
