"""Public SDK surface for embedfs.

This module provides a stable import path for host services.
It re-exports the asset filesystem facade, loaders, and typed errors.
"""

from __future__ import annotations

from assetfs.asset_record import AssetRecord
from assetfs.asset_table import AssetTable
from assetfs.filesystem_facade import AssetFileSystem, get_filesystem
from assetfs.filesystem_view import AssetHandle, FilesystemView
from assetfs.table_generator import generate_asset_module, write_asset_module
from assetfs.table_loader import load_asset_table, load_asset_table_file
from core.config import EmbedFsConfig
from core.errors import AssetDecodeError, AssetNotFoundError, EmbedFsError
from core.types import AssetStat, GenerateOptions

__all__ = [
    "AssetDecodeError",
    "AssetFileSystem",
    "AssetHandle",
    "AssetNotFoundError",
    "AssetRecord",
    "AssetStat",
    "AssetTable",
    "EmbedFsConfig",
    "EmbedFsError",
    "FilesystemView",
    "GenerateOptions",
    "generate_asset_module",
    "get_filesystem",
    "load_asset_table",
    "load_asset_table_file",
    "write_asset_module",
]
