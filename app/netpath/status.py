"""Point-in-time reachability check.

One ``os.stat`` call, mapped to a PathStatus:

- success or permission denied -> MOUNTED (the path exists)
- not found, timed out, network down, not connected -> DISCONNECTED
- any other OS error -> UNKNOWN

The call blocks; on a dead network share it lasts as long as the OS
redirector timeout.
"""

import errno
import logging
import os

from netpath.models import PathStatus

logger = logging.getLogger(__name__)

DISCONNECTED_ERRNOS = frozenset(
    {
        errno.ENOENT,
        errno.ETIMEDOUT,
        errno.ENETDOWN,
        errno.ENOTCONN,
    }
)

# Windows reports dead shares through winerror rather than errno
DISCONNECTED_WINERRORS = frozenset({53, 64, 67, 2250})


def status_from_error(error: OSError) -> PathStatus:
    """Map an OS error raised by the status check to a PathStatus."""
    if isinstance(error, PermissionError):
        return PathStatus.MOUNTED
    if isinstance(error, (FileNotFoundError, TimeoutError)):
        return PathStatus.DISCONNECTED
    if error.errno in DISCONNECTED_ERRNOS:
        return PathStatus.DISCONNECTED
    if getattr(error, "winerror", None) in DISCONNECTED_WINERRORS:
        return PathStatus.DISCONNECTED
    return PathStatus.UNKNOWN


def check_status(path: str) -> PathStatus:
    """Check a path with a single metadata query.

    Args:
        path: Path to check.

    Returns:
        MOUNTED, DISCONNECTED or UNKNOWN.
    """
    try:
        os.stat(path)
    except OSError as e:
        status = status_from_error(e)
        logger.debug("Status check of %s failed (%s) -> %s", path, e, status.value)
        return status
    return PathStatus.MOUNTED
