"""Path classification domain models.

This module defines the data structures shared by every inspection
backend: the mount-table record, the path taxonomies and the
inspection result returned to callers.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Any


class PathType(str, Enum):
    """Semantic category of the storage backing a path.

    Attributes:
        UNKNOWN: Category could not be determined.
        REMOVABLE: Removable media (USB sticks, SD cards).
        FIXED: Fixed local storage.
        REMOTE: Network storage; see RemoteType for the protocol.
        CDROM: Optical media.
        RAMDISK: RAM-backed storage.
        VIRTUAL: Pseudo filesystem (Unix only); the raw filesystem
            type is carried in ``PathInfo.virtual_fs``.
    """

    UNKNOWN = "unknown"
    REMOVABLE = "removable"
    FIXED = "fixed"
    REMOTE = "remote"
    CDROM = "cdrom"
    RAMDISK = "ramdisk"
    VIRTUAL = "virtual"


class RemoteType(str, Enum):
    """Protocol of a remote path.

    Attributes:
        SMB: Windows share / SMB / CIFS. ``WINDOWS_SHARE`` is an alias.
        NFS: Network File System.
        AFS: Andrew File System.
        WEBDAV: WebDAV share reached through the Windows redirector.
        OTHER: Known remote family without a dedicated member; the
            family label is carried in ``PathInfo.remote_detail``.
        UNKNOWN: Remote, but the protocol is not recognised.
    """

    SMB = "smb"
    WINDOWS_SHARE = "smb"
    NFS = "nfs"
    AFS = "afs"
    WEBDAV = "webdav"
    OTHER = "other"
    UNKNOWN = "unknown"


class PathStatus(str, Enum):
    """Connectivity state of a path, as reported by the status check.

    Attributes:
        MOUNTED: The path answered a metadata query.
        DISCONNECTED: The path looks unreachable (not found, network down).
        UNKNOWN: Not checked yet, or the check was inconclusive.
        OTHER: Any other state; described by ``PathInfo.status_detail``.
    """

    MOUNTED = "mounted"
    DISCONNECTED = "disconnected"
    UNKNOWN = "unknown"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class DeviceNumber:
    """Major/minor pair identifying the device behind a mount."""

    major: int
    minor: int

    @property
    def is_virtual(self) -> bool:
        """Major number 0 means there is no real block device."""
        return self.major == 0

    def __str__(self) -> str:
        return f"{self.major}:{self.minor}"


@dataclass(frozen=True, slots=True)
class MountRecord:
    """One row of ``/proc/self/mountinfo``.

    See proc(5). Only the fields needed for classification are kept;
    per-mount flags and optional tags are discarded by the parser.

    Attributes:
        mount_id: Unique identifier of the mount.
        parent_id: Identifier of the parent mount.
        device_number: Backing device (major, minor).
        fs_root: Subtree of the filesystem exposed at this mount.
        mount_point: Where the filesystem is attached.
        fs_type: Filesystem type, e.g. "ext4" or "nfs4".
        block_device: Mount source, e.g. "/dev/sda1" or "server:/export".
        mount_options: Per-superblock options, kept verbatim.
    """

    mount_id: int
    parent_id: int
    device_number: DeviceNumber
    fs_root: PurePosixPath
    mount_point: PurePosixPath
    fs_type: str
    block_device: str
    mount_options: str

    @property
    def depth(self) -> int:
        """Number of path components in the mount point ("/" is 1)."""
        return len(self.mount_point.parts)


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of classifying one mount or volume.

    Attributes:
        kind: Semantic category.
        remote_kind: Protocol, set only when kind is REMOTE.
        virtual_fs: Raw filesystem type, set only when kind is VIRTUAL.
        remote_detail: Family label, set only when remote_kind is OTHER.
    """

    kind: PathType
    remote_kind: RemoteType | None = None
    virtual_fs: str | None = None
    remote_detail: str | None = None

    def __post_init__(self) -> None:
        """Reject combinations that cannot come out of a classifier."""
        if self.remote_kind is not None and self.kind != PathType.REMOTE:
            msg = f"remote_kind requires kind=remote, got {self.kind.value}"
            raise ValueError(msg)
        if self.virtual_fs is not None and self.kind != PathType.VIRTUAL:
            msg = f"virtual_fs requires kind=virtual, got {self.kind.value}"
            raise ValueError(msg)


@dataclass(slots=True)
class PathInfo:
    """Result of inspecting a path.

    Every field except ``status`` and ``status_detail`` is fixed once the
    inspector returns; the status fields are updated in place by
    :meth:`check_status`.

    Attributes:
        path: The path exactly as given by the caller.
        kind: Semantic category of the backing storage.
        remote_kind: Protocol for remote paths, None otherwise.
        resolved_path: Symlink-free path (Unix only, None if resolution failed).
        is_symlink: Whether resolving followed a link; trailing slashes and
            relative spelling alone do not count.
        virtual_fs: Raw filesystem type for VIRTUAL paths.
        remote_detail: Family label when remote_kind is OTHER.
        status: Connectivity state, UNKNOWN until checked.
        status_detail: Description when status is OTHER.
    """

    path: str
    kind: PathType
    remote_kind: RemoteType | None = None
    resolved_path: str | None = None
    is_symlink: bool = False
    virtual_fs: str | None = None
    remote_detail: str | None = None
    status: PathStatus = field(default=PathStatus.UNKNOWN)
    status_detail: str | None = None

    @classmethod
    def from_classification(
        cls,
        path: str,
        classification: Classification,
        *,
        resolved_path: str | None = None,
        is_symlink: bool = False,
    ) -> "PathInfo":
        """Build a fresh, unchecked PathInfo from a classifier result."""
        return cls(
            path=path,
            kind=classification.kind,
            remote_kind=classification.remote_kind,
            resolved_path=resolved_path,
            is_symlink=is_symlink,
            virtual_fs=classification.virtual_fs,
            remote_detail=classification.remote_detail,
        )

    @property
    def is_removable(self) -> bool:
        return self.kind == PathType.REMOVABLE

    @property
    def is_fixed(self) -> bool:
        return self.kind == PathType.FIXED

    @property
    def is_remote(self) -> bool:
        return self.kind == PathType.REMOTE

    @property
    def is_cdrom(self) -> bool:
        return self.kind == PathType.CDROM

    @property
    def is_ramdisk(self) -> bool:
        return self.kind == PathType.RAMDISK

    @property
    def is_virtual(self) -> bool:
        return self.kind == PathType.VIRTUAL

    @property
    def is_status_mounted(self) -> bool:
        return self.status == PathStatus.MOUNTED

    @property
    def is_status_disconnected(self) -> bool:
        return self.status == PathStatus.DISCONNECTED

    @property
    def is_status_unknown(self) -> bool:
        return self.status == PathStatus.UNKNOWN

    @property
    def kind_label(self) -> str:
        """Human-readable category, including payloads.

        Examples: "fixed", "virtual (proc)", "remote (nfs)",
        "remote (other: SSH)".
        """
        if self.kind == PathType.VIRTUAL and self.virtual_fs:
            return f"virtual ({self.virtual_fs})"
        if self.kind == PathType.REMOTE and self.remote_kind is not None:
            if self.remote_kind == RemoteType.OTHER and self.remote_detail:
                return f"remote (other: {self.remote_detail})"
            return f"remote ({self.remote_kind.value})"
        return self.kind.value

    def check_status(self) -> PathStatus:
        """Query the path and store the resulting connectivity state.

        This performs a blocking metadata query; on unreachable network
        paths it may take as long as the OS redirector timeout.

        Returns:
            The new status.
        """
        from netpath.status import check_status

        self.status = check_status(self.path)
        self.status_detail = None
        return self.status

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "path": self.path,
            "kind": self.kind.value,
            "remote_kind": self.remote_kind.value if self.remote_kind else None,
            "resolved_path": self.resolved_path,
            "is_symlink": self.is_symlink,
            "virtual_fs": self.virtual_fs,
            "remote_detail": self.remote_detail,
            "status": self.status.value,
            "status_detail": self.status_detail,
        }
