"""statfs(2) backend for Linux.

Alternative to the mount-table backend: the kernel resolves the mount
stack itself and reports the filesystem magic number of whatever serves
the path. No table is parsed.
"""

import ctypes
import ctypes.util
import logging
import os
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from netpath.backends.base import Backend, BackendName
from netpath.classify.magic import MagicClassifier, magic_name, normalize_magic
from netpath.classify.sysfs import SYSFS_ROOT, read_removable_flag
from netpath.errors import FilesystemQueryError
from netpath.models import DeviceNumber, PathInfo
from netpath.mounts.resolver import resolve_symlink

logger = logging.getLogger(__name__)


class _StatfsResult(ctypes.Structure):
    # f_type leads struct statfs on every Linux ABI; the rest is room for
    # the remaining fields, which are not read
    _fields_ = [
        ("f_type", ctypes.c_long),
        ("_reserved", ctypes.c_byte * 248),
    ]


@lru_cache(maxsize=1)
def _libc() -> Any:
    libc = ctypes.CDLL(ctypes.util.find_library("c") or "libc.so.6", use_errno=True)
    libc.statfs.argtypes = [ctypes.c_char_p, ctypes.POINTER(_StatfsResult)]
    libc.statfs.restype = ctypes.c_int
    return libc


def statfs_magic(path: str) -> int:
    """Return the filesystem magic number (``f_type``) for a path.

    Raises:
        OSError: If statfs fails.
    """
    result = _StatfsResult()
    if _libc().statfs(os.fsencode(path), ctypes.byref(result)) != 0:
        errno = ctypes.get_errno()
        raise OSError(errno, os.strerror(errno), path)
    return normalize_magic(result.f_type)


def device_of(path: str) -> DeviceNumber:
    """Device number (``st_dev``) of the filesystem holding a path."""
    st_dev = os.stat(path).st_dev
    return DeviceNumber(major=os.major(st_dev), minor=os.minor(st_dev))


class StatfsBackend(Backend):
    """Inspects paths through their filesystem magic number.

    Args:
        sysfs_root: Root of the sysfs tree used for the removable flag.
        strict_removable: Propagate unparseable removable flags.
        statfs: Override for the statfs call, returning the magic number.
        stat_device: Override for the st_dev lookup.
    """

    def __init__(
        self,
        *,
        sysfs_root: Path = SYSFS_ROOT,
        strict_removable: bool = True,
        statfs: Callable[[str], int] = statfs_magic,
        stat_device: Callable[[str], DeviceNumber] = device_of,
    ) -> None:
        self._statfs = statfs
        self._stat_device = stat_device
        self._classifier = MagicClassifier(
            lambda device: read_removable_flag(device, sysfs_root),
            strict_removable=strict_removable,
        )

    @property
    def name(self) -> BackendName:
        return BackendName.STATFS

    def is_available(self) -> bool:
        return sys.platform.startswith("linux")

    def inspect(self, path: str) -> PathInfo:
        original = os.fspath(path)
        resolved, is_symlink = resolve_symlink(original)
        target = resolved if resolved is not None else original

        try:
            magic = self._statfs(target)
            device = self._stat_device(target)
        except OSError as e:
            raise FilesystemQueryError(original, e.strerror or str(e)) from e

        logger.debug(
            "%s: magic 0x%08x (%s), device %s",
            original,
            magic,
            magic_name(magic) or "unknown",
            device,
        )
        classification = self._classifier.classify(magic, device)
        return PathInfo.from_classification(
            original,
            classification,
            resolved_path=resolved,
            is_symlink=is_symlink,
        )
