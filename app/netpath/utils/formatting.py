"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, plus the
logging setup used by the CLI.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.theme import Theme

from netpath.models import PathInfo, PathStatus, PathType

NETPATH_THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "dim": "#b2bec3",
    }
)

# Styles per path category in inspection tables
KIND_STYLES: dict[PathType, str] = {
    PathType.FIXED: "success",
    PathType.REMOVABLE: "warning",
    PathType.REMOTE: "info",
    PathType.CDROM: "warning",
    PathType.RAMDISK: "muted",
    PathType.VIRTUAL: "muted",
    PathType.UNKNOWN: "error",
}

STATUS_STYLES: dict[PathStatus, str] = {
    PathStatus.MOUNTED: "success",
    PathStatus.DISCONNECTED: "error",
    PathStatus.UNKNOWN: "muted",
    PathStatus.OTHER: "warning",
}


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals, otherwise let Rich decide."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=NETPATH_THEME, color_system=_detect_color_system())
err_console = Console(theme=NETPATH_THEME, stderr=True, color_system=_detect_color_system())


def setup_logging(verbose: bool = False) -> None:
    """Route netpath log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logger = logging.getLogger("netpath")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_path=verbose, rich_tracebacks=verbose)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def create_inspection_table(show_status: bool = False) -> Table:
    """Create a table for inspection results.

    Args:
        show_status: Add a connectivity status column.

    Returns:
        Rich Table with path, category and resolved path columns.
    """
    table = Table(
        title="Path Inspection",
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Path", style="text", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Resolved", style="muted")
    if show_status:
        table.add_column("Status")
    return table


def format_inspection_row(info: PathInfo, show_status: bool = False) -> tuple[str, ...]:
    """Format a PathInfo as a table row with Rich markup."""
    style = KIND_STYLES.get(info.kind, "text")
    kind = f"[{style}]{info.kind_label}[/]"
    resolved = info.resolved_path or "-"
    if info.is_symlink:
        resolved = f"{resolved} (symlink)"
    if not show_status:
        return (info.path, kind, resolved)
    status_style = STATUS_STYLES.get(info.status, "text")
    status = info.status_detail or info.status.value
    return (info.path, kind, resolved, f"[{status_style}]{status}[/]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
