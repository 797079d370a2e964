"""Longest-prefix resolution of a path to the mount that backs it."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from netpath.errors import NoMatchingMountError
from netpath.models import MountRecord

logger = logging.getLogger(__name__)


def resolve_symlink(path: str | os.PathLike[str]) -> tuple[str | None, bool]:
    """Canonicalise a path, following every symlink.

    Resolution failures (broken links, permission errors, loops) are not
    fatal: the caller falls back to matching on the original path.

    Args:
        path: Path as given by the caller.

    Returns:
        Tuple of (resolved_path, is_symlink). resolved_path is None when
        resolution failed; is_symlink is True when the canonical path
        differs component-wise from the absolute form of the given one,
        so trailing slashes and relative inputs do not count as links.
    """
    original = os.fspath(path)
    try:
        resolved = str(Path(original).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.debug("Cannot resolve %s, matching on original path: %s", original, e)
        return None, False
    return resolved, Path(resolved) != Path(os.path.abspath(original))


def is_under(path: PurePosixPath, mount_point: PurePosixPath) -> bool:
    """Component-wise ancestor-or-equal test.

    Unlike a plain string prefix test, ``/mediaX`` is not under ``/media``.
    """
    if not path.is_absolute() or not mount_point.is_absolute():
        return False
    return path == mount_point or mount_point in path.parents


def resolve_mount(path: str | PurePosixPath, table: Sequence[MountRecord]) -> MountRecord:
    """Find the most specific mount record covering a path.

    Candidates are records whose mount point is an ancestor of (or equal
    to) the path. The candidate with the deepest mount point wins, since
    an inner mount shadows an outer one. On equal depth the record that
    appears last in the table wins; the kernel lists mounts in the order
    they were made, so the last one is the one stacked on top.

    Args:
        path: Absolute path to match.
        table: Parsed mount table.

    Returns:
        The best matching record.

    Raises:
        NoMatchingMountError: If no mount point covers the path.
    """
    target = PurePosixPath(path)
    best: MountRecord | None = None
    for record in table:
        if not is_under(target, record.mount_point):
            continue
        if best is None or record.depth >= best.depth:
            best = record

    if best is None:
        raise NoMatchingMountError(str(path))

    logger.debug(
        "Resolved %s to mount %s (id=%d, fs=%s)",
        path,
        best.mount_point,
        best.mount_id,
        best.fs_type,
    )
    return best
