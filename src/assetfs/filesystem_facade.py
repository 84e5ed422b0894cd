"""Filesystem facade over embedded and local backings.

This module selects a backing from a runtime switch, mounts it under an
optional prefix, and offers whole-asset convenience reads.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

from assetfs.asset_path import join_mount_prefix
from assetfs.asset_table import AssetTable
from assetfs.embedded_backing import EmbeddedFilesystem
from assetfs.filesystem_view import AssetHandle, FilesystemView
from assetfs.local_backing import LocalFilesystem
from core.constants import DEFAULT_TEXT_ENCODING
from core.errors import EmbedFsError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class PrefixedFilesystem:
    """Filesystem view that resolves request paths under a mount prefix."""

    def __init__(self, backing: FilesystemView, prefix: str) -> None:
        self._backing = backing
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """Return the mount prefix."""
        return self._prefix

    def open(self, path: str) -> AssetHandle:
        """Open ``path`` relative to the mount prefix."""
        return self._backing.open(join_mount_prefix(self._prefix, path))


class AssetFileSystem:
    """Facade exposing both backings of one asset table.

    Backings are built once at construction; callers pick one per
    filesystem request rather than per read.
    """

    def __init__(self, table: AssetTable, local_root: Path | None = None) -> None:
        """Initialize facade backings.

        Args:
            table: Immutable asset table.
            local_root: Directory that relative local paths resolve against.
        """
        self._table = table
        self._embedded = EmbeddedFilesystem(table)
        self._local = LocalFilesystem(table, local_root)

    @property
    def table(self) -> AssetTable:
        """Return the underlying asset table."""
        return self._table

    def filesystem(self, use_local: bool, prefix: str | None = None) -> FilesystemView:
        """Return a filesystem view.

        Args:
            use_local: Serve real files from disk instead of embedded payloads.
            prefix: Optional mount name prepended to every request path.

        Returns:
            Embedded or local view, mounted under ``prefix`` when given.
        """
        backing: FilesystemView = self._local if use_local else self._embedded
        if prefix:
            return PrefixedFilesystem(backing, prefix)
        return backing

    def read_bytes(self, use_local: bool, path: str) -> bytes:
        """Return the full content of an asset.

        Args:
            use_local: Read the real file from disk instead.
            path: Virtual asset path.

        Returns:
            Asset bytes. Embedded reads share the record's decoded buffer.

        Raises:
            AssetNotFoundError: If the asset or its local file is missing.
            AssetDecodeError: If the embedded payload is corrupt.
            OSError: For local filesystem failures.
        """
        if not use_local:
            return self._embedded.prepare(path).materialize()
        with self._local.open(path) as handle:
            return handle.readall()

    def must_read_bytes(self, use_local: bool, path: str) -> bytes:
        """Return asset content or terminate the process.

        Intended for startup code that treats a missing asset as a build
        defect.

        Raises:
            SystemExit: If the asset cannot be read.
        """
        try:
            return self.read_bytes(use_local, path)
        except (EmbedFsError, OSError) as error:
            _abort_read(use_local, path, error)

    def read_text(self, use_local: bool, path: str) -> str:
        """Return asset content decoded as UTF-8 text.

        Decoding is strict.

        Raises:
            UnicodeDecodeError: If the asset is not valid UTF-8.
        """
        return self.read_bytes(use_local, path).decode(DEFAULT_TEXT_ENCODING)

    def must_read_text(self, use_local: bool, path: str) -> str:
        """Return asset text or terminate the process.

        Raises:
            SystemExit: If the asset cannot be read or is not valid UTF-8.
        """
        content = self.must_read_bytes(use_local, path)
        try:
            return content.decode(DEFAULT_TEXT_ENCODING)
        except UnicodeDecodeError as error:
            _abort_read(use_local, path, error)


def _abort_read(use_local: bool, path: str, error: Exception) -> NoReturn:
    """Log a failed required read and terminate the process."""
    _LOGGER.error("asset_read_aborted", path=path, use_local=use_local, error=str(error))
    raise SystemExit(f"Required asset {path} is unavailable: {error}") from error


def get_filesystem(
    table: AssetTable,
    use_local: bool,
    prefix: str | None = None,
) -> FilesystemView:
    """Return an embedded or local filesystem view for a table.

    Args:
        table: Immutable asset table.
        use_local: Serve real files from disk instead of embedded payloads.
        prefix: Optional mount name prepended to every request path.

    Returns:
        Filesystem view.
    """
    return AssetFileSystem(table).filesystem(use_local, prefix)
