"""Exception hierarchy for path inspection.

All errors raised by netpath derive from InspectPathError so callers can
catch the whole family at once, while each failure mode keeps its own
class so collaborators (for example the mount helper reacting to
InvalidRootError) can handle one case specifically.
"""


class InspectPathError(Exception):
    """Base exception for path inspection errors."""


class MountTableError(InspectPathError):
    """Base exception for mount table problems."""


class MountTableUnreadableError(MountTableError):
    """Raised when the mount table file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read mount table {path}: {reason}")


class MalformedTableError(MountTableError):
    """Raised when a mount table line is structurally invalid."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed mount table line {line_number}: {reason}: {line!r}")


class FieldParseError(MountTableError):
    """Raised when a positional mount table field is not a valid number."""

    def __init__(self, line_number: int, line: str, field_name: str, value: str) -> None:
        self.line_number = line_number
        self.line = line
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Invalid {field_name} {value!r} on mount table line {line_number}: {line!r}"
        )


class NoMatchingMountError(InspectPathError):
    """Raised when no mount point covers the inspected path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No mount point covers path: {path}")


class RemovableAttributeUnreadableError(InspectPathError):
    """Raised when a removable flag exists but is not a boolean-like integer."""

    def __init__(self, attribute: str, value: str) -> None:
        self.attribute = attribute
        self.value = value
        super().__init__(f"Unparseable removable flag {value!r} in {attribute}")


class InvalidRootError(InspectPathError):
    """Raised when Windows reports no root directory for a drive spec."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid path '{path}': no root directory")


class UnknownDriveTypeError(InspectPathError):
    """Raised when Windows returns a drive type code outside the known set."""

    def __init__(self, path: str, code: int) -> None:
        self.path = path
        self.code = code
        super().__init__(f"Unknown drive type code {code} for path: {path}")


class UniversalNameUnresolvedError(InspectPathError):
    """Raised when a path cannot be resolved to its UNC universal name."""

    def __init__(self, path: str, code: int) -> None:
        self.path = path
        self.code = code
        super().__init__(f"Cannot resolve universal name for {path} (Win32 error {code})")


class BackendUnavailableError(InspectPathError):
    """Raised when the requested inspection backend cannot run on this host."""


class MountError(InspectPathError):
    """Raised when connecting a network share fails."""


class FilesystemQueryError(InspectPathError):
    """Raised when the filesystem behind a path cannot be queried."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot query filesystem for {path}: {reason}")
