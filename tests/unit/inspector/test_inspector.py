"""Unit tests for backend selection and the PathInspector facade."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from netpath.backends.base import Backend, BackendName
from netpath.backends.mountinfo import MountinfoBackend
from netpath.backends.statfs import StatfsBackend
from netpath.backends.windows import WindowsBackend
from netpath.config import NetpathConfig
from netpath.errors import BackendUnavailableError, NoMatchingMountError
from netpath.inspector import (
    PathInspector,
    create_backend,
    default_backend_name,
    inspect_path,
    inspect_path_and_status,
)
from netpath.models import PathInfo, PathStatus, PathType

PLATFORM = "netpath.inspector.sys.platform"


def _fake_backend(info: PathInfo | None = None, error: Exception | None = None) -> MagicMock:
    backend = MagicMock(spec=Backend)
    backend.is_available.return_value = True
    if error is not None:
        backend.inspect.side_effect = error
    else:
        backend.inspect.return_value = info
    return backend


class TestCreateBackend:
    """Tests for create_backend function."""

    def test_auto_on_linux(self, mountinfo_file: Path) -> None:
        """auto picks the mountinfo backend off Windows."""
        config = NetpathConfig(mountinfo_path=mountinfo_file)

        with patch(PLATFORM, "linux"):
            backend = create_backend("auto", config)

        assert isinstance(backend, MountinfoBackend)
        assert backend.mountinfo_path == mountinfo_file

    def test_auto_on_windows(self) -> None:
        """auto picks the Windows backend on win32."""
        with patch(PLATFORM, "win32"):
            assert default_backend_name() == BackendName.WINDOWS
            assert isinstance(create_backend(BackendName.AUTO), WindowsBackend)

    def test_statfs(self) -> None:
        """statfs is selectable by name on Linux."""
        with patch(PLATFORM, "linux"):
            assert isinstance(create_backend("statfs"), StatfsBackend)

    def test_unavailable(self, tmp_path: Path) -> None:
        """An unavailable backend raises BackendUnavailableError."""
        config = NetpathConfig(mountinfo_path=tmp_path / "missing")

        with pytest.raises(BackendUnavailableError, match="mountinfo"):
            create_backend(BackendName.MOUNTINFO, config)

    def test_windows_unavailable_off_windows(self) -> None:
        """The Windows backend cannot be forced on Linux."""
        with patch(PLATFORM, "linux"), pytest.raises(BackendUnavailableError):
            create_backend("windows")

    def test_unknown_name(self) -> None:
        """Unknown names are a ValueError."""
        with pytest.raises(ValueError):
            create_backend("zfs")


class TestPathInspector:
    """Tests for PathInspector."""

    def test_delegates_to_backend(self) -> None:
        """inspect returns the backend result unchanged."""
        info = PathInfo(path="/data", kind=PathType.FIXED)
        backend = _fake_backend(info)

        result = PathInspector(backend).inspect("/data")

        assert result is info
        backend.inspect.assert_called_once_with("/data")

    def test_errors_propagate(self) -> None:
        """Backend errors reach the caller."""
        backend = _fake_backend(error=NoMatchingMountError("/x"))

        with pytest.raises(NoMatchingMountError):
            PathInspector(backend).inspect("/x")

    def test_backend_built_lazily(self, mountinfo_file: Path, sysfs_root: Path) -> None:
        """The backend is created from config on first use."""
        config = NetpathConfig(
            backend=BackendName.MOUNTINFO,
            mountinfo_path=mountinfo_file,
            sysfs_root=sysfs_root,
        )
        inspector = PathInspector(config=config)

        with patch("netpath.backends.mountinfo.resolve_symlink", return_value=("/mnt/nfs", False)):
            info = inspector.inspect("/mnt/nfs")

        assert info.is_remote
        assert isinstance(inspector.backend, MountinfoBackend)

    def test_inspect_with_status(self) -> None:
        """inspect_with_status fills in the status."""
        backend = _fake_backend(PathInfo(path="/mnt/smb", kind=PathType.REMOTE))

        with patch("netpath.status.check_status", return_value=PathStatus.MOUNTED):
            info = PathInspector(backend).inspect_with_status("/mnt/smb")

        assert info.status == PathStatus.MOUNTED


class TestModuleFunctions:
    """Tests for inspect_path and inspect_path_and_status."""

    def test_inspect_path(self) -> None:
        """inspect_path uses a default inspector."""
        info = PathInfo(path="/", kind=PathType.FIXED)

        with patch("netpath.inspector.create_backend", return_value=_fake_backend(info)):
            assert inspect_path("/") is info

    def test_inspect_path_and_status(self) -> None:
        """inspect_path_and_status checks status after classifying."""
        info = PathInfo(path="/mnt/nfs", kind=PathType.REMOTE)

        with (
            patch("netpath.inspector.create_backend", return_value=_fake_backend(info)),
            patch("netpath.status.check_status", return_value=PathStatus.DISCONNECTED),
        ):
            result = inspect_path_and_status("/mnt/nfs")

        assert result.status == PathStatus.DISCONNECTED
