"""Removable-media detection through sysfs.

The kernel exposes every block device as ``/sys/dev/block/<major>:<minor>``,
a symlink into the device tree. Whole disks carry a ``removable``
attribute ("0" or "1"); partitions do not, but their parent directory is
the disk, so the attribute is read from ``..`` when the device is a
partition (it has a ``partition`` attribute).
"""

import logging
from pathlib import Path

from netpath.errors import RemovableAttributeUnreadableError
from netpath.models import DeviceNumber

logger = logging.getLogger(__name__)

SYSFS_ROOT = Path("/sys")


def removable_attribute_path(device: DeviceNumber, sysfs_root: Path = SYSFS_ROOT) -> Path:
    """Return the sysfs file holding the removable flag for a device."""
    dev_dir = sysfs_root / "dev" / "block" / str(device)
    if (dev_dir / "partition").exists():
        return dev_dir / ".." / "removable"
    return dev_dir / "removable"


def read_removable_flag(device: DeviceNumber, sysfs_root: Path = SYSFS_ROOT) -> bool:
    """Read the removable flag of the disk behind a device number.

    A missing or unreadable attribute means "not removable": most mounts
    (virtual, network, device-mapper) have no such attribute.

    Args:
        device: Device number of the mount.
        sysfs_root: Root of the sysfs tree.

    Returns:
        True if the kernel reports the disk as removable.

    Raises:
        RemovableAttributeUnreadableError: If the attribute exists but does
            not hold an integer.
    """
    attribute = removable_attribute_path(device, sysfs_root)
    try:
        raw = attribute.read_text(encoding="ascii", errors="replace")
    except OSError as e:
        logger.debug("No removable flag for %s at %s: %s", device, attribute, e)
        return False

    value = raw.strip()
    try:
        return int(value) != 0
    except ValueError as e:
        raise RemovableAttributeUnreadableError(str(attribute), value) from e
