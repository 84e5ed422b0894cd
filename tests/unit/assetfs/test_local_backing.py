"""Unit tests for the local-disk backing."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetfs.asset_record import AssetRecord
from assetfs.asset_table import AssetTable
from assetfs.local_backing import LocalFilesystem
from core.errors import AssetNotFoundError


def test_open_reads_real_file(asset_table: AssetTable, asset_source: Path) -> None:
    """Local reads should come from disk rather than the payload."""
    (asset_source / "file.txt").write_bytes(b"edited on disk\n")
    filesystem = LocalFilesystem(asset_table)

    with filesystem.open("/file.txt") as handle:
        content = handle.read()
        info = handle.stat()

    assert content == b"edited on disk\n" and info.size == 15 and info.name == "file.txt"


def test_open_unmapped_path_raises_not_found(asset_table: AssetTable) -> None:
    """Paths outside the table are not found, even if a file exists."""
    filesystem = LocalFilesystem(asset_table)

    with pytest.raises(AssetNotFoundError):
        filesystem.open("/missing.js")

    assert asset_table.lookup("/missing.js") is None


def test_open_absent_real_file_raises_not_found(asset_table: AssetTable) -> None:
    """A mapped path whose file is gone is reported as not found."""
    filesystem = LocalFilesystem(asset_table)

    with pytest.raises(AssetNotFoundError) as error:
        filesystem.open("/broken.bin")

    assert isinstance(error.value.__cause__, FileNotFoundError)


def test_relative_local_paths_resolve_against_root(tmp_path: Path) -> None:
    """Relative local paths are joined onto the configured root."""
    (tmp_path / "web").mkdir()
    (tmp_path / "web" / "a.txt").write_bytes(b"abc")
    table = AssetTable([AssetRecord(path="/a.txt", size=0, mod_time=0, local_path="web/a.txt")])
    filesystem = LocalFilesystem(table, local_root=tmp_path)

    with filesystem.open("a.txt") as handle:
        content = handle.read()

    assert content == b"abc"


def test_handle_supports_seek(asset_table: AssetTable) -> None:
    """Local handles delegate seeking to the real file."""
    with LocalFilesystem(asset_table).open("/file.txt") as handle:
        handle.seek(6)
        content = handle.read(8)

    assert content == b"embedded"


def test_directory_record_opens_empty_handle(asset_table: AssetTable) -> None:
    """Directory mappings open without listing children."""
    with LocalFilesystem(asset_table).open("/assets") as handle:
        info = handle.stat()
        content = handle.read()

    assert info.is_dir and content == b"" and handle.readdir() == []


def test_every_open_reads_fresh_from_disk(asset_table: AssetTable, asset_source: Path) -> None:
    """The local backing does not cache file content."""
    filesystem = LocalFilesystem(asset_table)
    first = filesystem.open("/file.txt").read()
    (asset_source / "file.txt").write_bytes(b"changed\n")

    second = filesystem.open("/file.txt").read()

    assert (first, second) == (b"hello embedded world\n", b"changed\n")


def test_other_os_errors_propagate_unchanged(asset_source: Path) -> None:
    """Failures other than a missing file are not reported as not found."""
    blocked_path = asset_source / "file.txt" / "child.txt"
    table = AssetTable(
        [AssetRecord(path="/child.txt", size=0, mod_time=0, local_path=str(blocked_path))]
    )

    with pytest.raises(NotADirectoryError) as error:
        LocalFilesystem(table).open("/child.txt")

    assert not isinstance(error.value, AssetNotFoundError)
