"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_MOUNTINFO = """\
22 1 8:2 / / rw,relatime shared:1 - ext4 /dev/sda2 rw,errors=remount-ro
23 22 0:21 / /proc rw,nosuid,nodev,noexec,relatime shared:12 - proc proc rw
24 22 0:22 / /sys rw,nosuid,nodev,noexec,relatime shared:7 - sysfs sysfs rw
25 22 0:5 / /dev rw,nosuid,relatime shared:2 - devtmpfs udev rw,size=8000000k
40 25 0:20 / /dev/mqueue rw,nosuid,nodev,noexec,relatime shared:15 - mqueue mqueue rw
41 25 0:25 / /dev/shm rw,nosuid,nodev shared:4 - tmpfs tmpfs rw
50 22 8:1 / /boot/efi rw,relatime shared:30 - vfat /dev/sda1 rw,fmask=0077
60 22 8:33 / /media/usb\\040stick rw,nosuid,nodev,relatime shared:40 - vfat /dev/sdc1 rw
61 22 11:0 / /media/cdrom ro,nosuid,nodev,relatime shared:41 - iso9660 /dev/sr0 ro
70 22 252:1 / /mnt/nfs rw,relatime shared:50 - nfs4 server:/export rw,vers=4.2
71 22 252:2 / /mnt/smb rw,relatime shared:51 - cifs //server/share rw,vers=3.1.1
72 22 252:3 / /mnt/ssh rw,nosuid,nodev,relatime shared:52 - fuse.sshfs user@host:/home rw
73 22 252:4 / /mnt/fuse rw,nosuid,nodev,relatime shared:53 - fuse.rclone remote: rw
"""


@pytest.fixture
def sample_mountinfo() -> str:
    """A realistic mountinfo table covering every category."""
    return SAMPLE_MOUNTINFO


@pytest.fixture
def mountinfo_file(tmp_path: Path, sample_mountinfo: str) -> Path:
    """The sample table written to a file."""
    path = tmp_path / "mountinfo"
    path.write_text(sample_mountinfo)
    return path


@pytest.fixture
def sysfs_root(tmp_path: Path) -> Path:
    """Empty fake sysfs tree; populate with the ``block_device`` fixture."""
    root = tmp_path / "sys"
    (root / "dev" / "block").mkdir(parents=True)
    (root / "devices").mkdir()
    return root


@pytest.fixture
def block_device(sysfs_root: Path) -> Callable[..., Path]:
    """Factory adding a disk (and optionally a partition) to the fake sysfs.

    Mirrors the kernel layout: ``dev/block/M:m`` is a symlink into
    ``devices/``, partitions live inside the disk directory and carry a
    ``partition`` attribute instead of ``removable``.
    """

    def _add(
        name: str,
        major: int,
        minor: int,
        removable: str | None = "0",
        partition: tuple[str, int] | None = None,
    ) -> Path:
        disk_dir = sysfs_root / "devices" / name
        disk_dir.mkdir()
        if removable is not None:
            (disk_dir / "removable").write_text(f"{removable}\n")
        (sysfs_root / "dev" / "block" / f"{major}:{minor}").symlink_to(disk_dir)
        if partition is not None:
            part_name, part_minor = partition
            part_dir = disk_dir / part_name
            part_dir.mkdir()
            (part_dir / "partition").write_text("1\n")
            (sysfs_root / "dev" / "block" / f"{major}:{part_minor}").symlink_to(part_dir)
        return disk_dir

    return _add


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so no user config is read."""
    home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home
