"""Mount table parsing and path-to-mount resolution."""

from netpath.mounts.parser import (
    MOUNTINFO_PATH,
    parse_mountinfo,
    parse_mountinfo_line,
    read_mount_table,
)
from netpath.mounts.resolver import is_under, resolve_mount, resolve_symlink

__all__ = [
    "MOUNTINFO_PATH",
    "is_under",
    "parse_mountinfo",
    "parse_mountinfo_line",
    "read_mount_table",
    "resolve_mount",
    "resolve_symlink",
]
