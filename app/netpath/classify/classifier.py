"""Classification of a mount record into the path taxonomy."""

import logging
from collections.abc import Callable
from pathlib import Path

from netpath.classify.fstypes import (
    CDROM_FS_TYPES,
    FUSE_PREFIX,
    LOCAL_BLOCK_FS_TYPES,
    REMOTE_FS_TYPES,
    remote_kind_for,
)
from netpath.classify.sysfs import SYSFS_ROOT, read_removable_flag
from netpath.errors import RemovableAttributeUnreadableError
from netpath.models import Classification, DeviceNumber, MountRecord, PathType

logger = logging.getLogger(__name__)

RemovableLookup = Callable[[DeviceNumber], bool]


class DeviceClassifier:
    """Maps a mount record to a PathType and, for remote mounts, a RemoteType.

    Checks run in a fixed order and the first match wins:

    1. Device major 0 -> VIRTUAL (pseudo filesystem, no backing device)
    2. Removable flag set -> REMOVABLE
    3. Optical filesystem type -> CDROM
    4. Remote filesystem type -> REMOTE, protocol chosen by type family
    5. Any other ``fuse*`` type -> UNKNOWN
    6. Local block filesystem type -> FIXED
    7. Otherwise -> UNKNOWN

    Args:
        sysfs_root: Root of the sysfs tree used for the removable flag.
        strict_removable: If True, an unparseable removable flag raises
            RemovableAttributeUnreadableError. If False it is logged and
            treated as "not removable".
        removable_lookup: Override for the removable flag lookup.
    """

    def __init__(
        self,
        *,
        sysfs_root: Path = SYSFS_ROOT,
        strict_removable: bool = True,
        removable_lookup: RemovableLookup | None = None,
    ) -> None:
        self._sysfs_root = sysfs_root
        self._strict_removable = strict_removable
        self._removable_lookup = removable_lookup

    def classify(self, record: MountRecord) -> Classification:
        """Classify a resolved mount record.

        Raises:
            RemovableAttributeUnreadableError: If strict and the removable
                flag cannot be parsed.
        """
        fs_type = record.fs_type

        if record.device_number.is_virtual:
            return Classification(kind=PathType.VIRTUAL, virtual_fs=fs_type)

        if self.is_removable(record.device_number):
            return Classification(kind=PathType.REMOVABLE)

        if fs_type in CDROM_FS_TYPES:
            return Classification(kind=PathType.CDROM)

        if fs_type in REMOTE_FS_TYPES:
            remote_kind, label = remote_kind_for(fs_type)
            return Classification(
                kind=PathType.REMOTE,
                remote_kind=remote_kind,
                remote_detail=label,
            )

        if fs_type.startswith(FUSE_PREFIX):
            logger.debug("Unclassified FUSE mount %s (%s)", record.mount_point, fs_type)
            return Classification(kind=PathType.UNKNOWN)

        if fs_type in LOCAL_BLOCK_FS_TYPES:
            return Classification(kind=PathType.FIXED)

        logger.debug("Unrecognised filesystem type %r at %s", fs_type, record.mount_point)
        return Classification(kind=PathType.UNKNOWN)

    def is_removable(self, device: DeviceNumber) -> bool:
        """Check the removable flag of a device, honouring strictness."""
        try:
            if self._removable_lookup is not None:
                return self._removable_lookup(device)
            return read_removable_flag(device, self._sysfs_root)
        except RemovableAttributeUnreadableError as e:
            if self._strict_removable:
                raise
            logger.warning("Treating %s as not removable: %s", device, e)
            return False
