"""Classification by statfs(2) filesystem magic number.

Alternative to the mountinfo classifier: instead of matching a path
against the mount table, a single statfs call on the path yields the
``f_type`` magic of the filesystem that serves it. Values come from
``include/uapi/linux/magic.h`` plus the out-of-tree ZFS and bcachefs
definitions.

Unlike the mountinfo classifier, tmpfs and ramfs are reported as
RAMDISK here: the magic number identifies them unambiguously, whereas a
device number of 0 only says "no backing device".
"""

import logging
from collections.abc import Callable
from types import MappingProxyType

from netpath.errors import RemovableAttributeUnreadableError
from netpath.models import Classification, DeviceNumber, PathType, RemoteType

logger = logging.getLogger(__name__)

TMPFS_MAGIC = 0x01021994
RAMFS_MAGIC = 0x858458F6
FUSE_SUPER_MAGIC = 0x65735546
NFS_SUPER_MAGIC = 0x6969

RAMDISK_MAGICS: MappingProxyType[int, str] = MappingProxyType(
    {
        TMPFS_MAGIC: "tmpfs",
        RAMFS_MAGIC: "ramfs",
    }
)

PSEUDO_MAGICS: MappingProxyType[int, str] = MappingProxyType(
    {
        0x9FA0: "proc",
        0x62656572: "sysfs",
        0x1CD1: "devpts",
        0x27E0EB: "cgroup",
        0x63677270: "cgroup2",
        0x19800202: "mqueue",
        0x64626720: "debugfs",
        0x74726163: "tracefs",
        0x73636673: "securityfs",
        0xF97CFF8C: "selinuxfs",
        0xCAFE4A11: "bpf",
        0x6165676C: "pstore",
        0x958458F6: "hugetlbfs",
        0x42494E4D: "binfmt_misc",
        0xDE5E81E4: "efivarfs",
        0x50495045: "pipefs",
        0x534F434B: "sockfs",
        0x6E736673: "nsfs",
        0x09041934: "anon_inode_fs",
        0x67596969: "rpc_pipefs",
        0x65735543: "fusectl",
        0x0187: "autofs",
        0x6E667364: "nfsd",
        0x07655821: "rdtgroup",
        0x62656570: "configfs",
    }
)

CDROM_MAGICS: MappingProxyType[int, str] = MappingProxyType(
    {
        0x9660: "iso9660",
        0x15013346: "udf",
    }
)

# magic -> (remote kind, label for RemoteType.OTHER, name)
REMOTE_MAGICS: MappingProxyType[int, tuple[RemoteType, str | None, str]] = MappingProxyType(
    {
        NFS_SUPER_MAGIC: (RemoteType.NFS, None, "nfs"),
        0x517B: (RemoteType.SMB, None, "smbfs"),
        0xFF534D42: (RemoteType.SMB, None, "cifs"),
        0xFE534D42: (RemoteType.SMB, None, "smb2"),
        0x5346414F: (RemoteType.AFS, None, "afs"),
        0x6B414653: (RemoteType.AFS, None, "kafs"),
        0x00C36400: (RemoteType.OTHER, "Cluster / distributed", "ceph"),
        0x01161970: (RemoteType.OTHER, "Cluster / distributed", "gfs2"),
        0x7461636F: (RemoteType.OTHER, "Cluster / distributed", "ocfs2"),
        0x01021997: (RemoteType.OTHER, "Network / protocol FS", "9p"),
        0x73757245: (RemoteType.OTHER, "Other", "coda"),
        0x564C: (RemoteType.OTHER, "Other", "ncpfs"),
    }
)

LOCAL_BLOCK_MAGICS: MappingProxyType[int, str] = MappingProxyType(
    {
        0xEF53: "ext2/ext3/ext4",
        0x58465342: "xfs",
        0x9123683E: "btrfs",
        0xF2F52010: "f2fs",
        0x3153464A: "jfs",
        0x52654973: "reiserfs",
        0xCA451A4E: "bcachefs",
        0x4D44: "vfat/msdos",
        0x2011BAB0: "exfat",
        0x5346544E: "ntfs",
        0x7366746E: "ntfs3",
        0x2FC12FC1: "zfs",
    }
)


def normalize_magic(value: int) -> int:
    """Fold a possibly sign-extended f_type into an unsigned 32-bit value."""
    return value & 0xFFFFFFFF


def magic_name(magic: int) -> str | None:
    """Best-effort filesystem name for a magic number."""
    magic = normalize_magic(magic)
    for table in (RAMDISK_MAGICS, PSEUDO_MAGICS, CDROM_MAGICS, LOCAL_BLOCK_MAGICS):
        if magic in table:
            return table[magic]
    if magic in REMOTE_MAGICS:
        return REMOTE_MAGICS[magic][2]
    if magic == FUSE_SUPER_MAGIC:
        return "fuse"
    return None


class MagicClassifier:
    """Maps a statfs magic number (plus device number) to the taxonomy.

    Order, first match wins:

    1. Pseudo filesystem magic -> VIRTUAL(name)
    2. tmpfs / ramfs -> RAMDISK
    3. Removable flag set on the backing disk -> REMOVABLE
    4. Optical magic -> CDROM
    5. Network magic -> REMOTE, with NFS, SMB, AFS or OTHER(label)
    6. FUSE -> UNKNOWN
    7. Local block magic -> FIXED
    8. Otherwise -> UNKNOWN

    Args:
        removable_lookup: Callable reporting the removable flag of a device.
        strict_removable: If False, unparseable removable flags are
            logged and treated as "not removable".
    """

    def __init__(
        self,
        removable_lookup: Callable[[DeviceNumber], bool],
        *,
        strict_removable: bool = True,
    ) -> None:
        self._removable_lookup = removable_lookup
        self._strict_removable = strict_removable

    def classify(self, magic: int, device: DeviceNumber) -> Classification:
        """Classify a filesystem from its magic number and device.

        Args:
            magic: ``f_type`` as returned by statfs(2).
            device: ``st_dev`` of the inspected path, split into major/minor.
        """
        magic = normalize_magic(magic)

        if magic in PSEUDO_MAGICS:
            return Classification(kind=PathType.VIRTUAL, virtual_fs=PSEUDO_MAGICS[magic])

        if magic in RAMDISK_MAGICS:
            return Classification(kind=PathType.RAMDISK)

        # btrfs subvolumes and other anonymous devices report major 0
        if not device.is_virtual and self._is_removable(device):
            return Classification(kind=PathType.REMOVABLE)

        if magic in CDROM_MAGICS:
            return Classification(kind=PathType.CDROM)

        if magic in REMOTE_MAGICS:
            remote_kind, label, _ = REMOTE_MAGICS[magic]
            return Classification(
                kind=PathType.REMOTE,
                remote_kind=remote_kind,
                remote_detail=label,
            )

        if magic == FUSE_SUPER_MAGIC:
            return Classification(kind=PathType.UNKNOWN)

        if magic in LOCAL_BLOCK_MAGICS:
            return Classification(kind=PathType.FIXED)

        logger.debug("Unrecognised filesystem magic 0x%08x", magic)
        return Classification(kind=PathType.UNKNOWN)

    def _is_removable(self, device: DeviceNumber) -> bool:
        try:
            return self._removable_lookup(device)
        except RemovableAttributeUnreadableError as e:
            if self._strict_removable:
                raise
            logger.warning("Treating %s as not removable: %s", device, e)
            return False
