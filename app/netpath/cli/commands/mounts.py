"""Mounts command implementation.

Lists the parsed mount table together with the category each mount
classifies to.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from netpath.classify.classifier import DeviceClassifier
from netpath.cli.types import OutputFormat, load_cli_config
from netpath.errors import InspectPathError
from netpath.models import Classification, MountRecord, PathInfo
from netpath.mounts.parser import read_mount_table
from netpath.utils.formatting import KIND_STYLES, console, print_error, print_info


def list_mounts(
    ctx: typer.Context,
    mountinfo: Annotated[
        Path | None,
        typer.Option(
            "--mountinfo",
            "-m",
            help="Read this mount table instead of the configured one.",
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
    """List mounts and how each one is classified (Linux)."""
    config = load_cli_config(ctx)
    classifier = DeviceClassifier(
        sysfs_root=config.sysfs_root,
        strict_removable=config.strict_removable,
    )

    try:
        table = read_mount_table(mountinfo or config.mountinfo_path)
        rows = [(record, classifier.classify(record)) for record in table]
    except InspectPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(rows)
        return

    if not rows:
        print_info("Mount table is empty.")
        return

    _print_table(rows)


# === Private helper functions ===


def _kind_label(record: MountRecord, classification: Classification) -> str:
    return PathInfo.from_classification(str(record.mount_point), classification).kind_label


def _print_table(rows: list[tuple[MountRecord, Classification]]) -> None:
    """Display mounts as a Rich table."""
    table = Table(title="Mount Table", show_lines=False, header_style="header")
    table.add_column("ID", justify="right", style="muted")
    table.add_column("Mount point", style="bold", no_wrap=True)
    table.add_column("Device", justify="right")
    table.add_column("Type")
    table.add_column("Source", style="dim")
    table.add_column("Kind")

    for record, classification in rows:
        style = KIND_STYLES.get(classification.kind, "text")
        table.add_row(
            str(record.mount_id),
            str(record.mount_point),
            str(record.device_number),
            record.fs_type,
            record.block_device,
            f"[{style}]{_kind_label(record, classification)}[/]",
        )

    console.print(table)
    console.print(f"\n[dim]{len(rows)} mounts[/dim]")


def _print_json(rows: list[tuple[MountRecord, Classification]]) -> None:
    """Display mounts as JSON."""
    data = [
        {
            "mount_id": record.mount_id,
            "parent_id": record.parent_id,
            "device": str(record.device_number),
            "fs_root": str(record.fs_root),
            "mount_point": str(record.mount_point),
            "fs_type": record.fs_type,
            "source": record.block_device,
            "options": record.mount_options,
            "kind": classification.kind.value,
            "remote_kind": classification.remote_kind.value
            if classification.remote_kind
            else None,
            "virtual_fs": classification.virtual_fs,
            "remote_detail": classification.remote_detail,
        }
        for record, classification in rows
    ]
    console.print_json(json.dumps(data))
