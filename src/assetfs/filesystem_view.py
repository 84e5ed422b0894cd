"""Filesystem capability contracts shared by both backings."""

from __future__ import annotations

from typing import Protocol

from core.types import AssetStat


class AssetHandle(Protocol):
    """Open, readable, seekable view over one resolved asset."""

    def read(self, size: int = -1) -> bytes: ...

    def readall(self) -> bytes: ...

    def seek(self, offset: int, whence: int = 0) -> int: ...

    def tell(self) -> int: ...

    def stat(self) -> AssetStat: ...

    def readdir(self, count: int = 0) -> list[AssetStat]: ...

    def close(self) -> None: ...


class FilesystemView(Protocol):
    """Read-only filesystem that resolves virtual paths into handles."""

    def open(self, path: str) -> AssetHandle: ...
