"""Inspect command implementation.

Classifies one or more paths and prints the result as a table or JSON.
"""

import json
from typing import Annotated

import typer

from netpath.backends.base import BackendName
from netpath.cli.types import OutputFormat, load_cli_config
from netpath.errors import InspectPathError
from netpath.inspector import PathInspector, create_backend
from netpath.models import PathInfo
from netpath.utils.formatting import (
    console,
    create_inspection_table,
    format_inspection_row,
    print_error,
)


def inspect_paths(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths to inspect."),
    ],
    status: Annotated[
        bool,
        typer.Option(
            "--status",
            "-s",
            help="Also check whether each path is reachable.",
        ),
    ] = False,
    backend: Annotated[
        BackendName | None,
        typer.Option(
            "--backend",
            "-b",
            help="Inspection backend (overrides the config file).",
            case_sensitive=False,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Classify the storage behind each PATH.

    Examples:
        netpath inspect /home /mnt/share     # Table of categories
        netpath inspect --status /mnt/nfs    # Include reachability
        netpath inspect -b statfs /dev/shm   # Use the statfs backend
        netpath inspect -f json .            # Output as JSON
    """
    config = load_cli_config(ctx)
    try:
        inspector = PathInspector(create_backend(backend or config.backend, config))
    except InspectPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    results: list[PathInfo] = []
    failed = False
    for path in paths:
        try:
            info = inspector.inspect_with_status(path) if status else inspector.inspect(path)
        except InspectPathError as e:
            print_error(f"{path}: {e}")
            failed = True
            continue
        results.append(info)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([info.to_dict() for info in results]))
    elif results:
        table = create_inspection_table(show_status=status)
        for info in results:
            table.add_row(*format_inspection_row(info, show_status=status))
        console.print(table)

    if failed:
        raise typer.Exit(code=1)
