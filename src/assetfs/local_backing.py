"""Local-disk asset backing.

This module maps virtual asset paths to their recorded local paths and
opens the real files. It holds no cache; every open reads from disk.
"""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import BinaryIO

from assetfs.asset_path import base_name, canonicalize_path
from assetfs.asset_table import AssetTable
from core.errors import AssetNotFoundError
from core.types import AssetStat


class LocalHandle(io.RawIOBase):
    """Handle delegating reads to a real file on disk."""

    def __init__(self, file_path: Path, name: str, file: BinaryIO | None) -> None:
        """Wrap an opened real file.

        Args:
            file_path: Resolved real path.
            name: Base name reported by stat.
            file: Opened binary file, or None for directories.
        """
        super().__init__()
        self._file_path = file_path
        self._name = name
        self._file = file

    @property
    def name(self) -> str:
        """Return the base name of the opened path."""
        return self._name

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return self._file is None or self._file.seekable()

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        if self._file is None:
            return 0
        return self._file.readinto(buffer)  # type: ignore[attr-defined]

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if self._file is None:
            return 0
        return self._file.seek(offset, whence)

    def tell(self) -> int:
        if self._file is None:
            return 0
        return self._file.tell()

    def stat(self) -> AssetStat:
        """Return metadata reported by the real filesystem."""
        if self._file is None:
            result = os.stat(self._file_path)
        else:
            result = os.fstat(self._file.fileno())
        return AssetStat(
            name=self._name,
            size=result.st_size,
            mode=result.st_mode,
            mod_time=int(result.st_mtime),
            is_dir=self._file is None,
        )

    def readdir(self, count: int = 0) -> list[AssetStat]:
        """Return no entries; directory listing is not served."""
        return []

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
        super().close()


class LocalFilesystem:
    """Filesystem view resolving paths to real files on local disk."""

    def __init__(self, table: AssetTable, local_root: Path | None = None) -> None:
        """Initialize local backing.

        Args:
            table: Asset table providing local path mappings.
            local_root: Directory that relative local paths resolve against;
                the working directory when omitted.
        """
        self._table = table
        self._local_root = local_root

    def open(self, path: str) -> LocalHandle:
        """Open the real file mapped to a virtual path.

        Args:
            path: Virtual request path.

        Returns:
            Handle over the real file.

        Raises:
            AssetNotFoundError: If the path is unmapped or the file is absent.
            OSError: For any other real filesystem failure.
        """
        file_path = self.resolve(path)
        name = base_name(path)
        if file_path.is_dir():
            return LocalHandle(file_path, name, None)
        try:
            file = open(file_path, "rb", buffering=0)
        except FileNotFoundError as error:
            raise AssetNotFoundError(
                f"Local file for {canonicalize_path(path)} not found at {file_path}. "
                "Run from the source tree root or disable local asset mode."
            ) from error
        return LocalHandle(file_path, name, file)

    def resolve(self, path: str) -> Path:
        """Return the real path mapped to a virtual path.

        Raises:
            AssetNotFoundError: If the path is not in the table.
        """
        record = self._table.lookup(path)
        if record is None:
            raise AssetNotFoundError(
                f"No asset mapping for {canonicalize_path(path)}. "
                "Check the request path or regenerate the asset module."
            )
        file_path = Path(record.local_path)
        if self._local_root is not None and not file_path.is_absolute():
            file_path = self._local_root / file_path
        return file_path
