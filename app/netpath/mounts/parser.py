"""Parser for the Linux mountinfo table.

Each line of ``/proc/<pid>/mountinfo`` has the shape (see proc(5))::

    36 35 98:0 /mnt1 /mnt2 rw,noatime master:1 - ext3 /dev/root rw,errors=continue
    (1)(2)(3)   (4)   (5)      (6)      (7)   (8) (9)   (10)         (11)

Fields (1)-(5) are consumed positionally; the mount flags (6) and the
variable-length optional tags (7) are ignored. The separator (8) splits
the line into its per-mount and per-superblock halves.
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from netpath.errors import FieldParseError, MalformedTableError, MountTableUnreadableError
from netpath.models import DeviceNumber, MountRecord

logger = logging.getLogger(__name__)

MOUNTINFO_PATH = Path("/proc/self/mountinfo")

SEPARATOR = " - "

# The kernel escapes space, tab, newline and backslash as \ooo
_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def unescape_field(value: str) -> str:
    r"""Decode the kernel's octal escapes in a mountinfo field.

    Examples:
        >>> unescape_field("/media/usb\\040stick")
        '/media/usb stick'
    """
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), value)


def _parse_int(value: str, field_name: str, line_number: int, line: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise FieldParseError(line_number, line, field_name, value)
    return int(value)


def parse_device_number(value: str, line_number: int = 0, line: str = "") -> DeviceNumber:
    """Parse a ``major:minor`` pair.

    Raises:
        FieldParseError: If the value has no colon or a half is not an
            unsigned integer.
    """
    major, sep, minor = value.partition(":")
    if not sep:
        raise FieldParseError(line_number, line, "device number", value)
    return DeviceNumber(
        major=_parse_int(major, "device major", line_number, line),
        minor=_parse_int(minor, "device minor", line_number, line),
    )


def parse_mountinfo_line(line: str, line_number: int = 1) -> MountRecord:
    """Parse one mountinfo line into a MountRecord.

    Args:
        line: A single line, without its trailing newline.
        line_number: 1-based position of the line, used in error messages.

    Returns:
        The parsed record.

    Raises:
        MalformedTableError: If the separator or a positional field is missing.
        FieldParseError: If an id or the device number is not numeric.
    """
    pre, sep, post = line.partition(SEPARATOR)
    if not sep:
        raise MalformedTableError(line_number, line, "missing ' - ' separator")

    vfs = pre.split()
    if len(vfs) < 3:
        raise MalformedTableError(line_number, line, "missing mount id, parent id or device")

    mount_id = _parse_int(vfs[0], "mount id", line_number, line)
    parent_id = _parse_int(vfs[1], "parent id", line_number, line)
    device_number = parse_device_number(vfs[2], line_number, line)

    if len(vfs) < 5:
        raise MalformedTableError(line_number, line, "missing root or mount point")

    superblock = post.split()
    if len(superblock) < 3:
        raise MalformedTableError(
            line_number, line, "missing filesystem type, source or super options"
        )

    return MountRecord(
        mount_id=mount_id,
        parent_id=parent_id,
        device_number=device_number,
        fs_root=PurePosixPath(unescape_field(vfs[3])),
        mount_point=PurePosixPath(unescape_field(vfs[4])),
        fs_type=superblock[0],
        block_device=unescape_field(superblock[1]),
        mount_options=superblock[2],
    )


def parse_mountinfo(text: str | Iterable[str]) -> list[MountRecord]:
    """Parse a whole mountinfo table, preserving line order.

    Blank lines are skipped. Any other line that fails to parse aborts
    the whole parse; dropping a record could make the resolver fall back
    to a less specific ancestor mount.

    Args:
        text: Raw table text, or an iterable of lines (e.g. an open file).

    Returns:
        Records in table order.
    """
    lines = text.splitlines() if isinstance(text, str) else text
    records: list[MountRecord] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        if not line.strip():
            continue
        records.append(parse_mountinfo_line(line, line_number))
    logger.debug("Parsed %d mount records", len(records))
    return records


def read_mount_table(path: Path | str = MOUNTINFO_PATH) -> list[MountRecord]:
    """Read and parse the mount table for the current mount namespace.

    The table is re-read on every call; the kernel regenerates it on
    each read and mounts may change between calls.

    Raises:
        MountTableUnreadableError: If the file cannot be read.
        MalformedTableError: If a line is structurally invalid.
        FieldParseError: If a numeric field is invalid.
    """
    table_path = Path(path)
    try:
        with table_path.open(encoding="utf-8", errors="surrogateescape") as f:
            return parse_mountinfo(f)
    except OSError as e:
        raise MountTableUnreadableError(str(table_path), e.strerror or str(e)) from e
