"""Shared typed models.

This module defines immutable data models shared by the asset table,
both filesystem backings, the generator, and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from core.constants import DEFAULT_MOD_TIME


@dataclass(frozen=True)
class AssetStat:
    """File metadata returned by handle stat calls.

    Attributes:
        name: Base name of the opened path.
        size: Content length in bytes.
        mode: File mode bits including the file type.
        mod_time: Modification time in seconds since epoch.
        is_dir: Whether the entry is a directory.
    """

    name: str
    size: int
    mode: int
    mod_time: int
    is_dir: bool

    @property
    def modified_at(self) -> datetime:
        """Return modification time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.mod_time, tz=timezone.utc)


@dataclass(frozen=True)
class GenerateOptions:
    """Asset module generation options.

    Attributes:
        source_dirs: Directories to embed.
        strip_prefix: Leading path removed from virtual asset paths.
        ignore: Optional regex; matching relative paths are skipped.
        include: Optional regex; only matching file paths are embedded.
        mod_time: Optional fixed modification time for every asset.
        package_comment: Optional comment written at the module top.
    """

    source_dirs: tuple[str, ...]
    strip_prefix: str = ""
    ignore: str | None = None
    include: str | None = None
    mod_time: int | None = None
    package_comment: str | None = None

    def resolved_mod_time(self, observed: float) -> int:
        """Return the modification time to record for an asset."""
        if self.mod_time is not None:
            return self.mod_time
        return int(observed) if observed > 0 else DEFAULT_MOD_TIME
