"""Unit tests for the mountinfo parser.

Tests for line parsing, whole-table parsing and reading the table file.
"""

from pathlib import Path, PurePosixPath

import pytest
from netpath.classify.classifier import DeviceClassifier
from netpath.errors import (
    FieldParseError,
    MalformedTableError,
    MountTableError,
    MountTableUnreadableError,
)
from netpath.models import DeviceNumber, MountRecord, PathType
from netpath.mounts.parser import (
    parse_device_number,
    parse_mountinfo,
    parse_mountinfo_line,
    read_mount_table,
    unescape_field,
)

MQUEUE_LINE = (
    "40 28 0:20 / /dev/mqueue rw,nosuid,nodev,noexec,relatime shared:15 - mqueue mqueue rw"
)


class TestParseMountinfoLine:
    """Tests for parse_mountinfo_line function."""

    def test_mqueue_line(self) -> None:
        """A full mountinfo line parses into the expected record."""
        record = parse_mountinfo_line(MQUEUE_LINE)

        assert record == MountRecord(
            mount_id=40,
            parent_id=28,
            device_number=DeviceNumber(major=0, minor=20),
            fs_root=PurePosixPath("/"),
            mount_point=PurePosixPath("/dev/mqueue"),
            fs_type="mqueue",
            block_device="mqueue",
            mount_options="rw",
        )

    def test_mqueue_line_classifies_as_virtual(self) -> None:
        """The mqueue record classifies as Virtual("mqueue")."""
        record = parse_mountinfo_line(MQUEUE_LINE)

        result = DeviceClassifier(removable_lookup=lambda _: False).classify(record)

        assert result.kind == PathType.VIRTUAL
        assert result.virtual_fs == "mqueue"
        assert result.remote_kind is None

    def test_missing_device_number_is_field_error(self) -> None:
        """A line without the major:minor field fails with FieldParseError."""
        with pytest.raises(FieldParseError) as exc_info:
            parse_mountinfo_line("40 28 /dev/mqueue rw - mqueue mqueue rw", line_number=7)

        assert exc_info.value.line_number == 7
        assert exc_info.value.value == "/dev/mqueue"
        assert "device number" in str(exc_info.value)

    def test_missing_separator(self) -> None:
        """A line without ' - ' is structurally malformed."""
        with pytest.raises(MalformedTableError, match="separator"):
            parse_mountinfo_line("40 28 0:20 / /dev/mqueue rw mqueue mqueue rw")

    def test_missing_mount_point(self) -> None:
        """Too few per-mount fields is a structural error, not a parse error."""
        with pytest.raises(MalformedTableError, match="mount point"):
            parse_mountinfo_line("40 28 0:20 / - mqueue mqueue rw")

    def test_missing_superblock_fields(self) -> None:
        """The right half needs type, source and options."""
        with pytest.raises(MalformedTableError):
            parse_mountinfo_line("40 28 0:20 / /dev/mqueue rw - mqueue")

    def test_missing_ids(self) -> None:
        """A left half with fewer than three fields is malformed."""
        with pytest.raises(MalformedTableError):
            parse_mountinfo_line("40 - mqueue mqueue rw")

    def test_non_numeric_mount_id(self) -> None:
        """A non-numeric mount id fails with FieldParseError."""
        with pytest.raises(FieldParseError) as exc_info:
            parse_mountinfo_line("x 28 0:20 / /dev/mqueue rw - mqueue mqueue rw")

        assert exc_info.value.field_name == "mount id"

    def test_negative_major_rejected(self) -> None:
        """Device numbers are unsigned."""
        with pytest.raises(FieldParseError):
            parse_mountinfo_line("40 28 -1:20 / /dev/mqueue rw - mqueue mqueue rw")

    def test_optional_fields_ignored(self) -> None:
        """Any number of optional tags before the separator is accepted."""
        line = (
            "36 35 98:0 /mnt1 /mnt2 rw,noatime master:1 shared:2 "
            "- ext3 /dev/root rw,errors=continue"
        )

        record = parse_mountinfo_line(line)

        assert record.fs_root == PurePosixPath("/mnt1")
        assert record.mount_point == PurePosixPath("/mnt2")
        assert record.fs_type == "ext3"
        assert record.mount_options == "rw,errors=continue"

    def test_escaped_mount_point(self) -> None:
        """Octal escapes in the mount point and source are decoded."""
        line = r"60 22 8:33 / /media/usb\040stick rw - vfat /dev/disk\040a rw"

        record = parse_mountinfo_line(line)

        assert record.mount_point == PurePosixPath("/media/usb stick")
        assert record.block_device == "/dev/disk a"

    def test_errors_share_base_class(self) -> None:
        """Both parse failures are MountTableErrors."""
        assert issubclass(FieldParseError, MountTableError)
        assert issubclass(MalformedTableError, MountTableError)
        assert not issubclass(FieldParseError, MalformedTableError)


class TestParseDeviceNumber:
    """Tests for parse_device_number function."""

    def test_valid(self) -> None:
        """major:minor splits into integers."""
        assert parse_device_number("259:3") == DeviceNumber(259, 3)

    def test_non_numeric_minor(self) -> None:
        """A non-numeric half names the failing half."""
        with pytest.raises(FieldParseError) as exc_info:
            parse_device_number("8:a")

        assert exc_info.value.field_name == "device minor"


class TestUnescapeField:
    """Tests for unescape_field function."""

    def test_all_kernel_escapes(self) -> None:
        """Space, tab, newline and backslash escapes are decoded."""
        assert unescape_field(r"a\040b\011c\012d\134e") == "a b\tc\nd\\e"

    def test_plain_value_unchanged(self) -> None:
        """Values without escapes pass through."""
        assert unescape_field("/home/user") == "/home/user"


class TestParseMountinfo:
    """Tests for parse_mountinfo function."""

    def test_preserves_order(self, sample_mountinfo: str) -> None:
        """Records come back in table order."""
        records = parse_mountinfo(sample_mountinfo)

        assert [r.mount_id for r in records][:3] == [22, 23, 24]
        assert records[-1].mount_point == PurePosixPath("/mnt/fuse")

    def test_blank_lines_skipped(self) -> None:
        """Blank lines carry no record."""
        records = parse_mountinfo(f"\n{MQUEUE_LINE}\n\n")

        assert len(records) == 1

    def test_accepts_iterable(self) -> None:
        """An iterable of newline-terminated lines is accepted."""
        records = parse_mountinfo([MQUEUE_LINE + "\n"])

        assert records[0].mount_options == "rw"

    def test_bad_line_reports_line_number(self) -> None:
        """A malformed line aborts the parse and carries its position."""
        text = f"{MQUEUE_LINE}\nbroken line\n"

        with pytest.raises(MalformedTableError) as exc_info:
            parse_mountinfo(text)

        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "broken line"


class TestReadMountTable:
    """Tests for read_mount_table function."""

    def test_reads_file(self, mountinfo_file: Path) -> None:
        """The table file is read and parsed."""
        records = read_mount_table(mountinfo_file)

        assert len(records) == 13

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing table is a hard error."""
        with pytest.raises(MountTableUnreadableError) as exc_info:
            read_mount_table(tmp_path / "missing")

        assert exc_info.value.path == str(tmp_path / "missing")
