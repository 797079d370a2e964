"""Mount-table backend for Linux.

Resolves symlinks, parses ``/proc/self/mountinfo``, picks the most
specific mount covering the path and classifies it by device number,
removable flag and filesystem type name.
"""

import logging
import os
import sys
from pathlib import Path

from netpath.backends.base import Backend, BackendName
from netpath.classify.classifier import DeviceClassifier
from netpath.models import PathInfo
from netpath.mounts.parser import MOUNTINFO_PATH, read_mount_table
from netpath.mounts.resolver import resolve_mount, resolve_symlink

logger = logging.getLogger(__name__)


class MountinfoBackend(Backend):
    """Inspects paths through the kernel mount table.

    The table is read fresh on every call, so concurrent inspections
    never share state.

    Args:
        mountinfo_path: Location of the mount table.
        classifier: Classifier for resolved mount records.
    """

    def __init__(
        self,
        *,
        mountinfo_path: Path = MOUNTINFO_PATH,
        classifier: DeviceClassifier | None = None,
    ) -> None:
        self._mountinfo_path = Path(mountinfo_path)
        self._classifier = classifier if classifier is not None else DeviceClassifier()

    @property
    def name(self) -> BackendName:
        return BackendName.MOUNTINFO

    @property
    def mountinfo_path(self) -> Path:
        return self._mountinfo_path

    def is_available(self) -> bool:
        """Available wherever the mount table file exists (Linux)."""
        return sys.platform != "win32" and self._mountinfo_path.exists()

    def inspect(self, path: str) -> PathInfo:
        original = os.fspath(path)
        resolved, is_symlink = resolve_symlink(original)
        target = resolved if resolved is not None else os.path.abspath(original)

        table = read_mount_table(self._mountinfo_path)
        record = resolve_mount(target, table)
        classification = self._classifier.classify(record)

        logger.debug("%s -> %s", original, classification.kind.value)
        return PathInfo.from_classification(
            original,
            classification,
            resolved_path=resolved,
            is_symlink=is_symlink,
        )
