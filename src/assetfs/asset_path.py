"""Virtual path canonicalization helpers.

Asset tables are keyed on canonical, slash-rooted paths. Every lookup
runs request paths through these helpers before indexing.
"""

from __future__ import annotations

import posixpath

from core.constants import PATH_SEPARATOR, ROOT_PATH


def canonicalize_path(path: str) -> str:
    """Return the canonical form of a virtual path.

    The result is rooted at ``/``, has no duplicate separators, and has
    ``.``/``..`` segments resolved without ever climbing above the root.

    Args:
        path: Raw request path.

    Returns:
        Canonical path string.
    """
    rooted = ROOT_PATH + path.lstrip(PATH_SEPARATOR)
    return posixpath.normpath(rooted)


def base_name(path: str) -> str:
    """Return the last segment of a virtual path, or ``/`` for the root."""
    canonical = canonicalize_path(path)
    if canonical == ROOT_PATH:
        return ROOT_PATH
    return posixpath.basename(canonical)


def join_mount_prefix(prefix: str, path: str) -> str:
    """Place a request path under a mount prefix.

    The request path is canonicalized first so ``..`` segments cannot
    climb out of the mount.

    Args:
        prefix: Mount name, such as ``/assets``.
        path: Request path relative to the mount.

    Returns:
        Canonical path inside the mount.
    """
    mount = canonicalize_path(prefix)
    request = canonicalize_path(path)
    if request == ROOT_PATH:
        return mount
    return canonicalize_path(mount + request)
