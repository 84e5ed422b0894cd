"""Unit tests for asset record materialization."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

import assetfs.asset_record as asset_record_module
from assetfs.asset_record import AssetRecord
from assetfs.decode_gate import GateState
from core.constants import EMBEDDED_DIR_MODE, EMBEDDED_FILE_MODE
from core.errors import AssetDecodeError, AssetTableError


def _counting_decoder(monkeypatch: pytest.MonkeyPatch, delay: float = 0.0) -> list[str]:
    calls: list[str] = []
    calls_lock = threading.Lock()
    real_decode = asset_record_module.decode_payload

    def decode(encoded: str, expected_size: int) -> bytes:
        with calls_lock:
            calls.append(encoded)
        time.sleep(delay)
        return real_decode(encoded, expected_size)

    monkeypatch.setattr(asset_record_module, "decode_payload", decode)
    return calls


def test_materialize_returns_shared_buffer(record_factory, helpers_content: bytes) -> None:
    """Repeated materialization returns the same bytes object."""
    record = record_factory("/helpers.js", helpers_content)

    first = record.materialize()
    second = record.materialize()

    assert first == helpers_content and first is second


def test_materialize_decodes_once_under_concurrency(
    monkeypatch: pytest.MonkeyPatch,
    record_factory,
    helpers_content: bytes,
) -> None:
    """One hundred concurrent callers should trigger a single decode."""
    calls = _counting_decoder(monkeypatch, delay=0.05)
    record = record_factory("/helpers.js", helpers_content)
    barrier = threading.Barrier(100)

    def materialize(_: int) -> bytes:
        barrier.wait()
        return record.materialize()

    with ThreadPoolExecutor(max_workers=100) as executor:
        results = list(executor.map(materialize, range(100)))

    assert len(calls) == 1
    assert all(result is results[0] for result in results)


def test_zero_size_record_skips_decoder(monkeypatch: pytest.MonkeyPatch, record_factory) -> None:
    """Zero-size records never invoke the decompressor."""
    calls = _counting_decoder(monkeypatch)
    record = record_factory("/empty.txt", b"")

    content = record.materialize()

    assert content == b"" and not calls and record.decode_state is GateState.UNCOMPUTED


def test_directory_record_skips_decoder(monkeypatch: pytest.MonkeyPatch) -> None:
    """Directory records are never passed to decode."""
    calls = _counting_decoder(monkeypatch)
    record = AssetRecord(path="/assets", size=0, mod_time=0, local_path="web/assets", is_dir=True)

    assert record.materialize() == b"" and not calls and record.mode == EMBEDDED_DIR_MODE


def test_corrupt_payload_error_is_replayed(monkeypatch: pytest.MonkeyPatch) -> None:
    """A decode failure is cached and re-raised without retrying."""
    calls = _counting_decoder(monkeypatch)
    record = AssetRecord(path="/broken.bin", size=10, mod_time=0, local_path="x", compressed="@@@@")

    with pytest.raises(AssetDecodeError) as first:
        record.materialize()
    with pytest.raises(AssetDecodeError) as second:
        record.materialize()

    assert first.value is second.value and len(calls) == 1
    assert "/broken.bin" in str(first.value)


def test_stat_reports_synthetic_metadata(record_factory) -> None:
    """Stat should expose the recorded size, mode, and time."""
    record = record_factory("/file.txt", b"hello")

    info = record.stat("file.txt")

    assert (info.name, info.size, info.mode, info.is_dir) == (
        "file.txt",
        5,
        EMBEDDED_FILE_MODE,
        False,
    )


def test_directory_with_payload_is_rejected() -> None:
    """Directories cannot carry compressed content."""
    with pytest.raises(AssetTableError):
        AssetRecord(path="/d", size=3, mod_time=0, local_path="d", is_dir=True, compressed="AAAA")


def test_sized_record_without_payload_is_rejected() -> None:
    """Non-zero sizes require a payload."""
    with pytest.raises(AssetTableError):
        AssetRecord(path="/f", size=3, mod_time=0, local_path="f")
