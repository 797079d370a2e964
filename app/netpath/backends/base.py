"""Abstract base class for inspection backends.

Every backend implements the same contract: given a path, return a
fresh PathInfo with status UNKNOWN. Backends differ in how they find
the filesystem behind the path (mount table, statfs, Win32 drive APIs).
"""

from abc import ABC, abstractmethod
from enum import Enum

from netpath.models import PathInfo


class BackendName(str, Enum):
    """Available inspection backends."""

    AUTO = "auto"
    MOUNTINFO = "mountinfo"
    STATFS = "statfs"
    WINDOWS = "windows"


class Backend(ABC):
    """Abstract base class for all inspection backends.

    Example:
        >>> backend = MountinfoBackend()
        >>> if backend.is_available():
        ...     info = backend.inspect("/home")
        ...     print(info.kind)
    """

    @property
    @abstractmethod
    def name(self) -> BackendName:
        """Return the identifier of this backend."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend can run on the current host.

        Returns:
            True if the backend can be used, False otherwise.
        """

    @abstractmethod
    def inspect(self, path: str) -> PathInfo:
        """Classify the storage behind a path.

        Args:
            path: Path to inspect, absolute or relative to the working
                directory.

        Returns:
            PathInfo with status UNKNOWN.

        Raises:
            InspectPathError: Subclass describing the first failure.
        """
