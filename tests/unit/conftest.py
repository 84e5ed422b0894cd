"""Shared asset fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from assetfs.asset_record import AssetRecord
from assetfs.asset_table import AssetTable
from assetfs.payload_codec import encode_payload

HELPERS_SIZE = 14003
ASSET_MOD_TIME = 1_600_000_000

RecordFactory = Callable[..., AssetRecord]


@pytest.fixture
def helpers_content() -> bytes:
    """Deterministic 14003-byte script used as the reference asset."""
    lines = "".join(f"// helper line {index:05d}\n" for index in range(700))
    return lines.encode("utf-8")[:HELPERS_SIZE]


@pytest.fixture
def record_factory() -> RecordFactory:
    """Build file records whose payload encodes the given content."""

    def build(path: str, content: bytes, local_path: str = "") -> AssetRecord:
        return AssetRecord(
            path=path,
            size=len(content),
            mod_time=ASSET_MOD_TIME,
            local_path=local_path or path.lstrip("/"),
            compressed=encode_payload(content) if content else "",
        )

    return build


@pytest.fixture
def asset_source(tmp_path: Path, helpers_content: bytes) -> Path:
    """Write the real files that back the sample asset table."""
    source_dir = tmp_path / "web"
    (source_dir / "assets").mkdir(parents=True)
    (source_dir / "helpers.js").write_bytes(helpers_content)
    (source_dir / "file.txt").write_bytes(b"hello embedded world\n")
    (source_dir / "empty.txt").write_bytes(b"")
    (source_dir / "assets" / "app.css").write_bytes(b"body { margin: 0; }\n")
    return source_dir


@pytest.fixture
def asset_table(
    asset_source: Path,
    helpers_content: bytes,
    record_factory: RecordFactory,
) -> AssetTable:
    """Sample table whose local paths point into ``asset_source``."""
    return AssetTable(
        [
            _directory_record("/", asset_source),
            record_factory("/helpers.js", helpers_content, str(asset_source / "helpers.js")),
            record_factory("/file.txt", b"hello embedded world\n", str(asset_source / "file.txt")),
            record_factory("/empty.txt", b"", str(asset_source / "empty.txt")),
            _directory_record("/assets", asset_source / "assets"),
            record_factory(
                "/assets/app.css",
                b"body { margin: 0; }\n",
                str(asset_source / "assets" / "app.css"),
            ),
            AssetRecord(
                path="/broken.bin",
                size=10,
                mod_time=ASSET_MOD_TIME,
                local_path=str(asset_source / "broken.bin"),
                compressed="not base64!!",
            ),
        ]
    )


def _directory_record(path: str, local_path: Path) -> AssetRecord:
    return AssetRecord(
        path=path,
        size=0,
        mod_time=ASSET_MOD_TIME,
        local_path=str(local_path),
        is_dir=True,
    )
