"""Immutable asset table.

This module maps canonical virtual paths to asset records. Tables are
built once from generated data and never mutated afterwards.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from assetfs.asset_path import canonicalize_path
from assetfs.asset_record import AssetRecord
from core.constants import DEFAULT_MOD_TIME
from core.errors import AssetTableError


class AssetTable(Mapping[str, AssetRecord]):
    """Read-only mapping from canonical path to asset record."""

    def __init__(self, records: Iterable[AssetRecord]) -> None:
        """Index records by canonical path.

        Args:
            records: Asset records to index.

        Raises:
            AssetTableError: If a path is not canonical or appears twice.
        """
        entries: dict[str, AssetRecord] = {}
        for record in records:
            if canonicalize_path(record.path) != record.path:
                raise AssetTableError(
                    f"Asset path {record.path!r} is not canonical. "
                    f"Use {canonicalize_path(record.path)!r} as the table key."
                )
            if record.path in entries:
                raise AssetTableError(
                    f"Duplicate asset path {record.path!r}. Each asset must be listed once."
                )
            entries[record.path] = record
        self._entries = MappingProxyType(entries)

    @classmethod
    def from_entries(cls, data: Mapping[str, Mapping[str, Any]]) -> "AssetTable":
        """Build a table from a generated ``ASSET_DATA`` literal.

        Args:
            data: Mapping of asset path to entry fields.

        Returns:
            Populated asset table.

        Raises:
            AssetTableError: If any entry is malformed.
        """
        return cls(_record_from_entry(path, entry) for path, entry in data.items())

    def lookup(self, path: str) -> AssetRecord | None:
        """Return the record for a request path, or None when unmapped."""
        return self._entries.get(canonicalize_path(path))

    def __getitem__(self, path: str) -> AssetRecord:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AssetTable({len(self)} assets)"


def _record_from_entry(path: str, entry: Mapping[str, Any]) -> AssetRecord:
    """Deserialize one generated table entry.

    Args:
        path: Asset path key.
        entry: Entry fields.

    Returns:
        Typed asset record.

    Raises:
        AssetTableError: If required fields are missing or mistyped.
    """
    if not isinstance(entry, Mapping):
        raise AssetTableError(f"Asset entry {path!r} must be a mapping of fields.")
    local_path = entry.get("local")
    if not isinstance(local_path, str):
        raise AssetTableError(f"Asset entry {path!r} is missing a string 'local' path.")
    size = entry.get("size", 0)
    mod_time = entry.get("modtime", DEFAULT_MOD_TIME)
    if isinstance(size, bool) or not isinstance(size, int):
        raise AssetTableError(f"Asset entry {path!r} has non-integer size {size!r}.")
    if isinstance(mod_time, bool) or not isinstance(mod_time, int):
        raise AssetTableError(f"Asset entry {path!r} has non-integer modtime {mod_time!r}.")
    compressed = entry.get("compressed", "")
    if not isinstance(compressed, str):
        raise AssetTableError(f"Asset entry {path!r} has a non-text compressed payload.")
    return AssetRecord(
        path=path,
        size=size,
        mod_time=mod_time,
        local_path=local_path,
        is_dir=bool(entry.get("is_dir", False)),
        compressed=compressed,
    )
