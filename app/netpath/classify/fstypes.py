"""Filesystem type name tables used by the mountinfo classifier.

Remote types are grouped by family; the family decides the RemoteType
reported for a remote mount. All tables are immutable.
"""

from types import MappingProxyType

from netpath.models import RemoteType

NFS_FS_TYPES: frozenset[str] = frozenset({"nfs", "nfs4"})

SMB_FS_TYPES: frozenset[str] = frozenset({"cifs", "smbfs", "smb3"})

SSH_FS_TYPES: frozenset[str] = frozenset({"sshfs", "fuse.sshfs"})

CLUSTER_FS_TYPES: frozenset[str] = frozenset({"ceph", "fuse.ceph", "glusterfs", "fuse.glusterfs"})

PROTOCOL_FS_TYPES: frozenset[str] = frozenset({"9p", "afp", "davfs", "fuse.davfs"})

# Older or less common, still seen in the wild
LEGACY_FS_TYPES: frozenset[str] = frozenset({"ncpfs", "coda", "ocfs2", "gfs", "gfs2"})


# (types, remote kind, label for RemoteType.OTHER), checked in order
REMOTE_FS_FAMILIES: tuple[tuple[frozenset[str], RemoteType, str | None], ...] = (
    (NFS_FS_TYPES, RemoteType.NFS, None),
    (SMB_FS_TYPES, RemoteType.SMB, None),
    (SSH_FS_TYPES, RemoteType.OTHER, "SSH"),
    (CLUSTER_FS_TYPES, RemoteType.OTHER, "Cluster / distributed"),
    (PROTOCOL_FS_TYPES, RemoteType.OTHER, "Network / protocol FS"),
    (LEGACY_FS_TYPES, RemoteType.OTHER, "Other"),
)

REMOTE_FS_TYPES: frozenset[str] = frozenset().union(*(types for types, _, _ in REMOTE_FS_FAMILIES))

LOCAL_BLOCK_FS_TYPES: frozenset[str] = frozenset(
    {
        # Linux native
        "ext2",
        "ext3",
        "ext4",
        "xfs",
        "btrfs",
        "f2fs",
        "jfs",
        "reiserfs",
        "reiser4",
        "bcachefs",
        # FAT family
        "vfat",
        "msdos",
        "exfat",
        # NTFS
        "ntfs",
        "ntfs3",
        # Out of tree but common
        "zfs",
    }
)

CDROM_FS_TYPES: frozenset[str] = frozenset({"iso9660", "udf"})

FUSE_PREFIX = "fuse"

# Lookup from type name to (remote kind, label); built once
_REMOTE_LOOKUP: MappingProxyType[str, tuple[RemoteType, str | None]] = MappingProxyType(
    {
        fs_type: (kind, label)
        for types, kind, label in reversed(REMOTE_FS_FAMILIES)
        for fs_type in types
    }
)


def remote_kind_for(fs_type: str) -> tuple[RemoteType, str | None]:
    """Map a remote filesystem type to its protocol.

    Args:
        fs_type: Filesystem type string from the mount table.

    Returns:
        Tuple of (RemoteType, label). The label is set only for
        RemoteType.OTHER. Unlisted types yield (RemoteType.UNKNOWN, None).
    """
    return _REMOTE_LOOKUP.get(fs_type, (RemoteType.UNKNOWN, None))
