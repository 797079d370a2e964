"""Connect command implementation.

Maps a network share to a drive letter (Windows only).
"""

from typing import Annotated

import typer

from netpath.connect import mount_path
from netpath.errors import MountError
from netpath.utils.formatting import print_error, print_success


def connect_share(
    local: Annotated[
        str,
        typer.Argument(help="Drive spec to map, e.g. Z:"),
    ],
    remote: Annotated[
        str,
        typer.Argument(help="Share to connect, e.g. \\\\server\\share"),
    ],
    username: Annotated[
        str | None,
        typer.Option(
            "--username",
            "-u",
            help="Account to connect as.",
        ),
    ] = None,
    password: Annotated[
        str | None,
        typer.Option(
            "--password",
            "-p",
            help="Password for the account (prompted when a username is given).",
        ),
    ] = None,
) -> None:
    """Map REMOTE to the drive LOCAL."""
    if username and password is None:
        password = typer.prompt("Password", hide_input=True)

    try:
        mount_path(local, remote, username=username, password=password)
    except MountError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Connected {remote} to {local}")
