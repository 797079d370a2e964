"""Top-level path inspection.

Picks a backend for the host and turns a path into a PathInfo. Backends
are stateless between calls; the mount table is read again for every
inspection.
"""

import logging
import sys

from netpath.backends.base import Backend, BackendName
from netpath.backends.mountinfo import MountinfoBackend
from netpath.backends.statfs import StatfsBackend
from netpath.backends.windows import WindowsBackend
from netpath.classify.classifier import DeviceClassifier
from netpath.config import NetpathConfig
from netpath.errors import BackendUnavailableError
from netpath.models import PathInfo

logger = logging.getLogger(__name__)


def default_backend_name() -> BackendName:
    """Backend used by "auto" on the current host."""
    if sys.platform == "win32":
        return BackendName.WINDOWS
    return BackendName.MOUNTINFO


def create_backend(
    name: BackendName | str = BackendName.AUTO,
    config: NetpathConfig | None = None,
) -> Backend:
    """Build a backend instance from a name and settings.

    Args:
        name: Backend name; "auto" picks the host default.
        config: Settings for sysfs, mount table and WebDAV markers.
            Defaults apply when omitted.

    Returns:
        A backend that is available on this host.

    Raises:
        BackendUnavailableError: If the backend cannot run here.
        ValueError: If the name is not a known backend.
    """
    cfg = config or NetpathConfig()
    backend_name = BackendName(name)
    if backend_name == BackendName.AUTO:
        backend_name = default_backend_name()

    backend: Backend
    if backend_name == BackendName.MOUNTINFO:
        backend = MountinfoBackend(
            mountinfo_path=cfg.mountinfo_path,
            classifier=DeviceClassifier(
                sysfs_root=cfg.sysfs_root,
                strict_removable=cfg.strict_removable,
            ),
        )
    elif backend_name == BackendName.STATFS:
        backend = StatfsBackend(
            sysfs_root=cfg.sysfs_root,
            strict_removable=cfg.strict_removable,
        )
    else:
        backend = WindowsBackend(webdav_markers=cfg.webdav_markers)

    if not backend.is_available():
        msg = f"Backend '{backend_name.value}' is not available on {sys.platform}"
        raise BackendUnavailableError(msg)

    logger.debug("Using %s backend", backend_name.value)
    return backend


def get_backend(name: BackendName | str = BackendName.AUTO) -> Backend:
    """Build a backend with default settings. See :func:`create_backend`."""
    return create_backend(name)


class PathInspector:
    """Classifies paths with one backend.

    The backend is created lazily on first use, so constructing an
    inspector never touches the host.

    Args:
        backend: Backend to use; built from ``config`` when omitted.
        config: Settings used to build the backend.

    Example:
        >>> inspector = PathInspector()
        >>> info = inspector.inspect("/home")
        >>> info.kind
        <PathType.FIXED: 'fixed'>
    """

    def __init__(
        self,
        backend: Backend | None = None,
        config: NetpathConfig | None = None,
    ) -> None:
        self._backend = backend
        self._config = config or NetpathConfig()

    @property
    def backend(self) -> Backend:
        if self._backend is None:
            self._backend = create_backend(self._config.backend, self._config)
        return self._backend

    def inspect(self, path: str) -> PathInfo:
        """Classify the storage behind a path.

        Args:
            path: Path to inspect.

        Returns:
            A fresh PathInfo with status UNKNOWN.

        Raises:
            InspectPathError: Subclass describing the first failure.
        """
        return self.backend.inspect(path)

    def inspect_with_status(self, path: str) -> PathInfo:
        """Classify a path and check its connectivity right away."""
        info = self.inspect(path)
        info.check_status()
        return info


def inspect_path(path: str) -> PathInfo:
    """Classify a path with the host's default backend."""
    return PathInspector().inspect(path)


def inspect_path_and_status(path: str) -> PathInfo:
    """Classify a path and fill in its connectivity status."""
    return PathInspector().inspect_with_status(path)
