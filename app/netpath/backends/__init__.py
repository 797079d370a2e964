"""Inspection backends for different host platforms.

This module exports the backend classes; use
:func:`netpath.inspector.create_backend` to pick one for the host.
"""

from netpath.backends.base import Backend, BackendName
from netpath.backends.mountinfo import MountinfoBackend
from netpath.backends.statfs import StatfsBackend
from netpath.backends.windows import WindowsBackend

__all__ = ["Backend", "BackendName", "MountinfoBackend", "StatfsBackend", "WindowsBackend"]
