"""Embedded asset backing.

This module serves asset content from decoded in-memory payloads.
Handles are read-only views over the record's shared buffer.
"""

from __future__ import annotations

import io

from assetfs.asset_path import base_name, canonicalize_path
from assetfs.asset_record import AssetRecord
from assetfs.asset_table import AssetTable
from core.errors import AssetNotFoundError
from core.types import AssetStat


class EmbeddedHandle(io.RawIOBase):
    """Seekable reader over decoded asset bytes."""

    def __init__(self, record: AssetRecord, data: bytes, name: str) -> None:
        """Wrap decoded content without copying it.

        Args:
            record: Resolved asset record.
            data: Decoded content owned by the record.
            name: Base name reported by stat.
        """
        super().__init__()
        self._record = record
        self._view = memoryview(data)
        self._name = name
        self._position = 0

    @property
    def name(self) -> str:
        """Return the base name of the opened path."""
        return self._name

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        self._check_open()
        end = min(self._position + len(buffer), len(self._view))
        count = max(end - self._position, 0)
        if count:
            memoryview(buffer).cast("B")[:count] = self._view[self._position : end]
            self._position = end
        return count

    def readall(self) -> bytes:
        self._check_open()
        data = bytes(self._view[self._position :])
        self._position = max(self._position, len(self._view))
        return data

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._check_open()
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            position = len(self._view) + offset
        else:
            raise ValueError(f"Invalid whence value: {whence}")
        if position < 0:
            raise ValueError(f"Negative seek position {position}")
        self._position = position
        return position

    def tell(self) -> int:
        self._check_open()
        return self._position

    def stat(self) -> AssetStat:
        """Return metadata for the opened asset."""
        return self._record.stat(self._name)

    def readdir(self, count: int = 0) -> list[AssetStat]:
        """Return no entries; embedded tables carry no child listings."""
        return []

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed asset handle.")


class EmbeddedFilesystem:
    """Filesystem view resolving paths through decoded embedded payloads."""

    def __init__(self, table: AssetTable) -> None:
        self._table = table

    def open(self, path: str) -> EmbeddedHandle:
        """Open an embedded asset.

        Args:
            path: Virtual request path.

        Returns:
            In-memory handle over the decoded content.

        Raises:
            AssetNotFoundError: If the path is not in the table.
            AssetDecodeError: If the payload cannot be decoded.
        """
        record = self.prepare(path)
        return EmbeddedHandle(record, record.materialize(), base_name(path))

    def prepare(self, path: str) -> AssetRecord:
        """Resolve a request path to its record.

        Raises:
            AssetNotFoundError: If the path is not in the table.
        """
        record = self._table.lookup(path)
        if record is None:
            raise AssetNotFoundError(
                f"No embedded asset at {canonicalize_path(path)}. "
                "Check the request path or regenerate the asset module."
            )
        return record
