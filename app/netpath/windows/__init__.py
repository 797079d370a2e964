"""Windows drive and network share inspection."""

from netpath.windows.volume import (
    DEFAULT_WEBDAV_MARKERS,
    WindowsVolumeResolver,
    drive_root,
    local_drive_spec,
    remote_kind_from_universal_name,
)

__all__ = [
    "DEFAULT_WEBDAV_MARKERS",
    "WindowsVolumeResolver",
    "drive_root",
    "local_drive_spec",
    "remote_kind_from_universal_name",
]
