"""netpath - classify filesystem paths by the storage behind them.

Example:
    >>> from netpath import inspect_path
    >>> info = inspect_path("/mnt/share")
    >>> info.kind, info.remote_kind
    (<PathType.REMOTE: 'remote'>, <RemoteType.NFS: 'nfs'>)
"""

__version__ = "0.1.0"

from netpath.errors import (  # noqa: E402
    BackendUnavailableError,
    InspectPathError,
    InvalidRootError,
    MountError,
    NoMatchingMountError,
)
from netpath.inspector import (  # noqa: E402
    PathInspector,
    create_backend,
    get_backend,
    inspect_path,
    inspect_path_and_status,
)
from netpath.models import PathInfo, PathStatus, PathType, RemoteType  # noqa: E402
from netpath.status import check_status  # noqa: E402

__all__ = [
    "BackendUnavailableError",
    "InspectPathError",
    "InvalidRootError",
    "MountError",
    "NoMatchingMountError",
    "PathInfo",
    "PathInspector",
    "PathStatus",
    "PathType",
    "RemoteType",
    "__version__",
    "check_status",
    "create_backend",
    "get_backend",
    "inspect_path",
    "inspect_path_and_status",
]
