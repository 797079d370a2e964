"""Unit tests for DeviceClassifier.

Tests for the decision order that maps a mount record to the taxonomy.
"""

from collections.abc import Callable
from pathlib import Path, PurePosixPath

import pytest
from netpath.classify.classifier import DeviceClassifier
from netpath.classify.fstypes import REMOTE_FS_TYPES, remote_kind_for
from netpath.errors import RemovableAttributeUnreadableError
from netpath.models import DeviceNumber, MountRecord, PathType, RemoteType


def _record(fs_type: str, major: int = 8, minor: int = 1) -> MountRecord:
    return MountRecord(
        mount_id=100,
        parent_id=1,
        device_number=DeviceNumber(major, minor),
        fs_root=PurePosixPath("/"),
        mount_point=PurePosixPath("/mnt/test"),
        fs_type=fs_type,
        block_device="source",
        mount_options="rw",
    )


def _not_removable(_: DeviceNumber) -> bool:
    return False


def _removable(_: DeviceNumber) -> bool:
    return True


class TestDeviceClassifier:
    """Tests for DeviceClassifier.classify."""

    @pytest.mark.parametrize("fs_type", ["proc", "tmpfs", "ext4", "nfs4", "weird"])
    def test_major_zero_always_virtual(self, fs_type: str) -> None:
        """Major 0 classifies as Virtual regardless of the type name."""
        classifier = DeviceClassifier(removable_lookup=_removable)

        result = classifier.classify(_record(fs_type, major=0))

        assert result.kind == PathType.VIRTUAL
        assert result.virtual_fs == fs_type

    def test_nfs4_is_remote_nfs(self) -> None:
        """nfs4 yields (Remote, NFS)."""
        result = DeviceClassifier(removable_lookup=_not_removable).classify(_record("nfs4"))

        assert (result.kind, result.remote_kind) == (PathType.REMOTE, RemoteType.NFS)

    def test_cifs_is_remote_smb(self) -> None:
        """cifs yields (Remote, SMB)."""
        result = DeviceClassifier(removable_lookup=_not_removable).classify(_record("cifs"))

        assert (result.kind, result.remote_kind) == (PathType.REMOTE, RemoteType.SMB)
        assert result.remote_kind == RemoteType.WINDOWS_SHARE

    @pytest.mark.parametrize(
        ("fs_type", "label"),
        [
            ("fuse.sshfs", "SSH"),
            ("glusterfs", "Cluster / distributed"),
            ("9p", "Network / protocol FS"),
            ("ncpfs", "Other"),
        ],
    )
    def test_other_remote_families(self, fs_type: str, label: str) -> None:
        """Remaining remote families yield Other(label)."""
        result = DeviceClassifier(removable_lookup=_not_removable).classify(_record(fs_type))

        assert result.kind == PathType.REMOTE
        assert result.remote_kind == RemoteType.OTHER
        assert result.remote_detail == label

    def test_removable_beats_fs_type(self) -> None:
        """The removable flag wins over the filesystem type."""
        result = DeviceClassifier(removable_lookup=_removable).classify(_record("iso9660"))

        assert result.kind == PathType.REMOVABLE

    @pytest.mark.parametrize("fs_type", ["iso9660", "udf"])
    def test_optical(self, fs_type: str) -> None:
        """Optical filesystems yield CDRom."""
        result = DeviceClassifier(removable_lookup=_not_removable).classify(_record(fs_type))

        assert result.kind == PathType.CDROM

    def test_unclassified_fuse_is_unknown(self) -> None:
        """FUSE types outside the remote tables are Unknown."""
        result = DeviceClassifier(removable_lookup=_not_removable).classify(_record("fuse.rclone"))

        assert result.kind == PathType.UNKNOWN
        assert result.remote_kind is None

    @pytest.mark.parametrize("fs_type", ["ext4", "xfs", "btrfs", "vfat", "exfat", "ntfs3", "zfs"])
    def test_local_block(self, fs_type: str) -> None:
        """Local block filesystems yield Fixed."""
        result = DeviceClassifier(removable_lookup=_not_removable).classify(_record(fs_type))

        assert result.kind == PathType.FIXED

    def test_unrecognised_type(self) -> None:
        """Anything else is Unknown."""
        result = DeviceClassifier(removable_lookup=_not_removable).classify(_record("squashfs"))

        assert result.kind == PathType.UNKNOWN

    def test_strict_propagates_bad_flag(self) -> None:
        """Strict mode raises on an unparseable removable flag."""

        def lookup(_: DeviceNumber) -> bool:
            raise RemovableAttributeUnreadableError("/sys/x/removable", "?")

        classifier = DeviceClassifier(removable_lookup=lookup, strict_removable=True)

        with pytest.raises(RemovableAttributeUnreadableError):
            classifier.classify(_record("ext4"))

    def test_lenient_downgrades_bad_flag(self, caplog: pytest.LogCaptureFixture) -> None:
        """Lenient mode logs a warning and treats the device as not removable."""

        def lookup(_: DeviceNumber) -> bool:
            raise RemovableAttributeUnreadableError("/sys/x/removable", "?")

        classifier = DeviceClassifier(removable_lookup=lookup, strict_removable=False)

        with caplog.at_level("WARNING", logger="netpath"):
            result = classifier.classify(_record("ext4"))

        assert result.kind == PathType.FIXED
        assert "not removable" in caplog.text

    def test_reads_sysfs_by_default(
        self, sysfs_root: Path, block_device: Callable[..., Path]
    ) -> None:
        """Without a lookup override the flag comes from sysfs."""
        block_device("sdc", 8, 32, removable="1", partition=("sdc1", 33))
        classifier = DeviceClassifier(sysfs_root=sysfs_root)

        result = classifier.classify(_record("vfat", major=8, minor=33))

        assert result.kind == PathType.REMOVABLE


class TestRemoteKindFor:
    """Tests for the remote filesystem tables."""

    def test_every_remote_type_has_a_kind(self) -> None:
        """Every listed remote type maps to a known protocol."""
        for fs_type in REMOTE_FS_TYPES:
            kind, _ = remote_kind_for(fs_type)
            assert kind != RemoteType.UNKNOWN

    def test_unlisted_type(self) -> None:
        """Unlisted types map to Unknown."""
        assert remote_kind_for("lustre") == (RemoteType.UNKNOWN, None)
