"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import EmbedFsConfig
from core.errors import EmbedFsConfigError


def test_from_env_defaults_to_embedded_assets(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without overrides the embedded backing is selected."""
    for variable in ("EMBEDFS_USE_LOCAL", "EMBEDFS_MOUNT_PREFIX", "EMBEDFS_TABLE_MODULE"):
        monkeypatch.delenv(variable, raising=False)

    config = EmbedFsConfig.from_env()

    assert config == EmbedFsConfig(use_local=False, mount_prefix=None, table_module=None)


@pytest.mark.parametrize("raw_value", ["1", "true", "YES", " on "])
def test_from_env_reads_local_switch(monkeypatch: pytest.MonkeyPatch, raw_value: str) -> None:
    """Truthy switch values enable local mode."""
    monkeypatch.setenv("EMBEDFS_USE_LOCAL", raw_value)

    assert EmbedFsConfig.from_env().use_local


def test_from_env_reads_prefix_and_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mount prefix and table module are passed through."""
    monkeypatch.setenv("EMBEDFS_MOUNT_PREFIX", "/static")
    monkeypatch.setenv("EMBEDFS_TABLE_MODULE", "app.assets_gen")

    config = EmbedFsConfig.from_env()

    assert (config.mount_prefix, config.table_module) == ("/static", "app.assets_gen")


def test_from_env_raises_for_invalid_switch(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unrecognized boolean values."""
    monkeypatch.setenv("EMBEDFS_USE_LOCAL", "maybe")

    with pytest.raises(EmbedFsConfigError):
        EmbedFsConfig.from_env()


def test_from_env_raises_for_relative_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mount prefixes must be absolute virtual paths."""
    monkeypatch.setenv("EMBEDFS_MOUNT_PREFIX", "static")

    with pytest.raises(EmbedFsConfigError):
        EmbedFsConfig.from_env()
