r"""Drive category and remote protocol detection on Windows.

Two independent queries are combined here:

- ``GetDriveTypeW`` on the drive root gives the category directly.
- For remote drives, ``WNetGetUniversalNameW`` turns a mapped drive
  letter back into its ``\\server\share`` form, whose shape tells SMB
  shares from WebDAV shares served by the WebClient redirector.

Both OS calls are injectable so the logic runs anywhere.
"""

import logging
import ntpath
from collections.abc import Callable, Sequence

from netpath.errors import InvalidRootError, UniversalNameUnresolvedError, UnknownDriveTypeError
from netpath.models import Classification, PathType, RemoteType
from netpath.windows import api

logger = logging.getLogger(__name__)

UNC_PREFIX = "\\\\"

# Tokens the WebClient redirector puts in universal names of WebDAV shares
DEFAULT_WEBDAV_MARKERS: tuple[str, ...] = ("DavWWWRoot", "@SSL")

DRIVE_TYPE_MAP: dict[int, PathType] = {
    api.DRIVE_UNKNOWN: PathType.UNKNOWN,
    api.DRIVE_REMOVABLE: PathType.REMOVABLE,
    api.DRIVE_FIXED: PathType.FIXED,
    api.DRIVE_REMOTE: PathType.REMOTE,
    api.DRIVE_CDROM: PathType.CDROM,
    api.DRIVE_RAMDISK: PathType.RAMDISK,
}


def drive_root(path: str) -> str:
    r"""Return the root directory to query for a path.

    Examples:
        >>> drive_root("c:\\Users\\me")
        'C:\\'
        >>> drive_root("\\\\server\\share\\docs")
        '\\\\server\\share\\'

    Raises:
        InvalidRootError: If the path has neither a drive letter nor a
            UNC prefix.
    """
    drive, _ = ntpath.splitdrive(path.replace("/", "\\"))
    if not drive:
        raise InvalidRootError(path)
    if drive.startswith(UNC_PREFIX):
        return drive + "\\"
    return drive.upper() + "\\"


def local_drive_spec(path: str) -> str:
    """Two-character drive spec ("Z:") of a drive-letter path."""
    return path[:2].upper()


def remote_kind_from_universal_name(
    name: str,
    webdav_markers: Sequence[str] = DEFAULT_WEBDAV_MARKERS,
) -> RemoteType:
    r"""Classify a universal name.

    ``\\server\share`` is SMB; a UNC name carrying a WebDAV marker
    (``\\server@SSL\DavWWWRoot\...``) is WebDAV; anything without a UNC
    prefix is UNKNOWN.
    """
    if not name.startswith(UNC_PREFIX):
        return RemoteType.UNKNOWN
    lowered = name.lower()
    if any(marker.lower() in lowered for marker in webdav_markers):
        return RemoteType.WEBDAV
    return RemoteType.SMB


class WindowsVolumeResolver:
    """Resolves Windows paths to a drive category and remote protocol.

    Args:
        get_drive_type: Callable returning the GetDriveTypeW code for a root.
        get_universal_name: Callable returning the UNC name of a path; it
            should raise OSError when the name cannot be resolved.
        webdav_markers: Tokens identifying WebDAV universal names.
    """

    def __init__(
        self,
        *,
        get_drive_type: Callable[[str], int] = api.get_drive_type,
        get_universal_name: Callable[[str], str] = api.get_universal_name,
        webdav_markers: Sequence[str] = DEFAULT_WEBDAV_MARKERS,
    ) -> None:
        self._get_drive_type = get_drive_type
        self._get_universal_name = get_universal_name
        self._webdav_markers = tuple(webdav_markers)

    def resolve_drive_category(self, path: str) -> PathType:
        """Map the OS drive type of the path's root to a PathType.

        Raises:
            InvalidRootError: If the root cannot be determined or the OS
                reports DRIVE_NO_ROOT_DIR.
            UnknownDriveTypeError: If the OS returns an unlisted code.
        """
        root = drive_root(path)
        code = self._get_drive_type(root)
        if code == api.DRIVE_NO_ROOT_DIR:
            raise InvalidRootError(path)
        if code not in DRIVE_TYPE_MAP:
            raise UnknownDriveTypeError(path, code)
        return DRIVE_TYPE_MAP[code]

    def universal_name(self, path: str) -> str:
        r"""Return the ``\\server\share\...`` form of a path.

        UNC paths are already universal and are returned unchanged.

        Raises:
            UniversalNameUnresolvedError: If the OS cannot resolve the path.
        """
        normalized = path.replace("/", "\\")
        if normalized.startswith(UNC_PREFIX):
            return normalized
        try:
            return self._get_universal_name(path)
        except OSError as e:
            code = getattr(e, "code", None) or getattr(e, "winerror", None) or e.errno or 0
            raise UniversalNameUnresolvedError(path, code) from e

    def resolve_remote_subtype(self, path: str) -> RemoteType:
        """Determine the protocol of a path already known to be remote.

        A mapped drive may still fail universal-name resolution
        transiently; that yields UNKNOWN instead of an error.
        """
        try:
            name = self.universal_name(path)
        except UniversalNameUnresolvedError as e:
            logger.warning("%s; reporting unknown remote type", e)
            return RemoteType.UNKNOWN
        remote_kind = remote_kind_from_universal_name(name, self._webdav_markers)
        logger.debug("Universal name %s -> %s", name, remote_kind.value)
        return remote_kind

    def classify(self, path: str) -> Classification:
        """Full classification of a Windows path."""
        kind = self.resolve_drive_category(path)
        if kind != PathType.REMOTE:
            return Classification(kind=kind)
        return Classification(kind=kind, remote_kind=self.resolve_remote_subtype(path))
