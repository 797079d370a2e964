r"""Thin ctypes bindings for the Win32 calls netpath needs.

- ``GetDriveTypeW`` (kernel32): drive category code for a root path.
- ``WNetGetUniversalNameW`` (mpr): UNC form (``\\server\share\...``) of a
  path on a mapped drive.
- ``WNetAddConnection2W`` (mpr): map a network share to a drive letter.

The DLLs are loaded lazily so this module imports on every platform.
"""

import ctypes
import logging
import sys
from typing import Any

logger = logging.getLogger(__name__)

# GetDriveTypeW return codes
DRIVE_UNKNOWN = 0
DRIVE_NO_ROOT_DIR = 1
DRIVE_REMOVABLE = 2
DRIVE_FIXED = 3
DRIVE_REMOTE = 4
DRIVE_CDROM = 5
DRIVE_RAMDISK = 6

NO_ERROR = 0
ERROR_MORE_DATA = 234
ERROR_NOT_CONNECTED = 2250

UNIVERSAL_NAME_INFO_LEVEL = 1
RESOURCETYPE_DISK = 1

_DWORD = ctypes.c_uint32


class UNIVERSAL_NAME_INFOW(ctypes.Structure):  # noqa: N801
    _fields_ = [("lpUniversalName", ctypes.c_wchar_p)]


class NETRESOURCEW(ctypes.Structure):  # noqa: N801
    _fields_ = [
        ("dwScope", _DWORD),
        ("dwType", _DWORD),
        ("dwDisplayType", _DWORD),
        ("dwUsage", _DWORD),
        ("lpLocalName", ctypes.c_wchar_p),
        ("lpRemoteName", ctypes.c_wchar_p),
        ("lpComment", ctypes.c_wchar_p),
        ("lpProvider", ctypes.c_wchar_p),
    ]


class Win32CallError(OSError):
    """Raised when a WNet call returns a non-zero status code."""

    def __init__(self, function: str, code: int) -> None:
        self.function = function
        self.code = code
        super().__init__(f"{function} failed with Win32 error {code}")


def _require_windows() -> None:
    if sys.platform != "win32":
        msg = "Win32 API calls are only available on Windows"
        raise OSError(msg)


def _kernel32() -> Any:
    _require_windows()
    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore[attr-defined]
    kernel32.GetDriveTypeW.argtypes = [ctypes.c_wchar_p]
    kernel32.GetDriveTypeW.restype = ctypes.c_uint
    return kernel32


def _mpr() -> Any:
    _require_windows()
    mpr = ctypes.WinDLL("mpr", use_last_error=True)  # type: ignore[attr-defined]
    mpr.WNetGetUniversalNameW.argtypes = [
        ctypes.c_wchar_p,
        _DWORD,
        ctypes.c_void_p,
        ctypes.POINTER(_DWORD),
    ]
    mpr.WNetGetUniversalNameW.restype = _DWORD
    mpr.WNetAddConnection2W.argtypes = [
        ctypes.POINTER(NETRESOURCEW),
        ctypes.c_wchar_p,
        ctypes.c_wchar_p,
        _DWORD,
    ]
    mpr.WNetAddConnection2W.restype = _DWORD
    return mpr


def get_drive_type(root: str) -> int:
    """Return the raw ``GetDriveTypeW`` code for a root path such as ``C:\\``."""
    code = int(_kernel32().GetDriveTypeW(root))
    logger.debug("GetDriveTypeW(%r) -> %d", root, code)
    return code


def get_universal_name(path: str) -> str:
    r"""Resolve a path to its universal (UNC) name.

    Uses the usual two-call pattern: the first call with an empty buffer
    reports the required size through ERROR_MORE_DATA.

    Raises:
        Win32CallError: If either call fails, e.g. ERROR_NOT_CONNECTED
            for a path that is not on a network drive.
    """
    mpr = _mpr()
    size = _DWORD(0)
    code = mpr.WNetGetUniversalNameW(path, UNIVERSAL_NAME_INFO_LEVEL, None, ctypes.byref(size))
    if code != ERROR_MORE_DATA:
        raise Win32CallError("WNetGetUniversalNameW", code)

    buffer = ctypes.create_string_buffer(size.value)
    code = mpr.WNetGetUniversalNameW(path, UNIVERSAL_NAME_INFO_LEVEL, buffer, ctypes.byref(size))
    if code != NO_ERROR:
        raise Win32CallError("WNetGetUniversalNameW", code)

    info = ctypes.cast(buffer, ctypes.POINTER(UNIVERSAL_NAME_INFOW)).contents
    if info.lpUniversalName is None:
        raise Win32CallError("WNetGetUniversalNameW", code)
    return str(info.lpUniversalName)


def add_connection(
    local: str,
    remote: str,
    username: str | None = None,
    password: str | None = None,
) -> None:
    r"""Map ``remote`` (``\\server\share``) to the drive ``local`` (``Z:``).

    Raises:
        Win32CallError: If WNetAddConnection2W fails.
    """
    resource = NETRESOURCEW(
        dwType=RESOURCETYPE_DISK,
        lpLocalName=local,
        lpRemoteName=remote,
        lpProvider=None,
    )
    code = _mpr().WNetAddConnection2W(ctypes.byref(resource), password, username, 0)
    if code != NO_ERROR:
        raise Win32CallError("WNetAddConnection2W", code)
