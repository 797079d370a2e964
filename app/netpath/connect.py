r"""Connecting network shares to drive letters (Windows).

``mount_path("Z:", "\\server\share")`` maps a share;
``mount_if_disconnected`` does so only when the drive letter currently
has no root directory.
"""

import logging
import sys

from netpath.errors import InvalidRootError, MountError
from netpath.inspector import PathInspector
from netpath.models import PathInfo
from netpath.windows import api
from netpath.windows.volume import local_drive_spec

logger = logging.getLogger(__name__)


def mount_path(
    local: str,
    remote: str,
    username: str | None = None,
    password: str | None = None,
) -> None:
    r"""Map a remote share to a local drive spec.

    Args:
        local: Drive spec such as ``Z:``.
        remote: Share such as ``\\server\share``.
        username: Account to connect as; the current user when None.
        password: Password for ``username``.

    Raises:
        MountError: If the host is not Windows or the OS rejects the
            connection.
    """
    if sys.platform != "win32":
        msg = f"Cannot mount {remote}: network drive mapping requires Windows"
        raise MountError(msg)

    logger.info("Mapping %s to %s", remote, local)
    try:
        api.add_connection(local, remote, username, password)
    except OSError as e:
        msg = f"Failed to map {remote} to {local}: {e}"
        raise MountError(msg) from e


def mount_if_disconnected(
    path: str,
    remote: str,
    inspector: PathInspector | None = None,
    username: str | None = None,
    password: str | None = None,
) -> PathInfo | None:
    r"""Inspect a path and map its drive if the drive has no root.

    Args:
        path: Drive-letter path such as ``Z:\\data``.
        remote: Share to map when the drive is missing.
        inspector: Inspector to use; a default one when omitted.
        username: Account to connect as.
        password: Password for ``username``.

    Returns:
        The PathInfo when the path was already reachable, None after a
        successful mount.

    Raises:
        MountError: If the mount is attempted and fails.
        InspectPathError: For inspection failures other than a missing root.
    """
    inspector = inspector or PathInspector()
    try:
        return inspector.inspect(path)
    except InvalidRootError:
        local = local_drive_spec(path)
        logger.info("%s has no root directory; connecting %s", local, remote)
        mount_path(local, remote, username, password)
        return None
