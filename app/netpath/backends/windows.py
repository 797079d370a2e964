"""Win32 backend: drive types and universal names."""

import os
import sys
from collections.abc import Sequence

from netpath.backends.base import Backend, BackendName
from netpath.models import PathInfo
from netpath.windows.volume import DEFAULT_WEBDAV_MARKERS, WindowsVolumeResolver


class WindowsBackend(Backend):
    """Inspects paths with GetDriveTypeW and WNetGetUniversalNameW.

    Symlinks are not followed; ``resolved_path`` stays None.

    Args:
        resolver: Volume resolver; a default one bound to the Win32 API
            is created when omitted.
        webdav_markers: Markers for the default resolver.
    """

    def __init__(
        self,
        *,
        resolver: WindowsVolumeResolver | None = None,
        webdav_markers: Sequence[str] = DEFAULT_WEBDAV_MARKERS,
    ) -> None:
        self._resolver = (
            resolver if resolver is not None else WindowsVolumeResolver(webdav_markers=webdav_markers)
        )

    @property
    def name(self) -> BackendName:
        return BackendName.WINDOWS

    @property
    def resolver(self) -> WindowsVolumeResolver:
        return self._resolver

    def is_available(self) -> bool:
        return sys.platform == "win32"

    def inspect(self, path: str) -> PathInfo:
        original = os.fspath(path)
        return PathInfo.from_classification(original, self._resolver.classify(original))
