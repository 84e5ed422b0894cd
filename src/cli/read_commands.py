"""Asset read command wiring for embedfs CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from assetfs.asset_table import AssetTable
from assetfs.filesystem_facade import AssetFileSystem
from assetfs.table_loader import load_asset_table, load_asset_table_file
from core.config import EmbedFsConfig
from core.constants import READ_CHUNK_SIZE
from core.errors import EmbedFsError


def add_read_commands(subparsers: Any) -> None:
    """Register cat and stat subcommands."""
    cat_parser = subparsers.add_parser("cat", help="Write an asset's content to stdout")
    _add_source_arguments(cat_parser)
    stat_parser = subparsers.add_parser("stat", help="Print an asset's metadata")
    _add_source_arguments(stat_parser)


def run_cat_command(config: EmbedFsConfig, args: argparse.Namespace) -> int:
    """Stream asset bytes to stdout."""
    try:
        view = _build_view(config, args)
        with view.open(args.path) as handle:
            chunk = handle.read(READ_CHUNK_SIZE)
            while chunk:
                sys.stdout.buffer.write(chunk)
                chunk = handle.read(READ_CHUNK_SIZE)
    except (EmbedFsError, OSError) as error:
        print(f"read_error={error}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0


def run_stat_command(config: EmbedFsConfig, args: argparse.Namespace) -> int:
    """Print asset metadata as tab-separated fields."""
    try:
        view = _build_view(config, args)
        with view.open(args.path) as handle:
            info = handle.stat()
    except (EmbedFsError, OSError) as error:
        print(f"read_error={error}", file=sys.stderr)
        return 1
    print(
        f"{info.name}\t"
        f"{info.size}\t"
        f"{info.mode:o}\t"
        f"{info.modified_at.isoformat()}\t"
        f"{'dir' if info.is_dir else 'file'}"
    )
    return 0


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Virtual asset path, e.g. /helpers.js")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--table-file", help="Generated asset module file")
    source.add_argument("--table-module", help="Importable generated asset module")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Read real files from disk instead of embedded payloads",
    )
    parser.add_argument("--prefix", help="Mount prefix prepended to the path")
    parser.add_argument("--local-root", help="Directory that relative local paths resolve against")


def _build_view(config: EmbedFsConfig, args: argparse.Namespace) -> Any:
    """Build the filesystem view selected by CLI args and config."""
    table = _load_table(config, args)
    local_root = Path(args.local_root).expanduser().resolve() if args.local_root else None
    filesystem = AssetFileSystem(table, local_root=local_root)
    use_local = args.local or config.use_local
    prefix = args.prefix or config.mount_prefix
    return filesystem.filesystem(use_local, prefix)


def _load_table(config: EmbedFsConfig, args: argparse.Namespace) -> AssetTable:
    if args.table_file:
        return load_asset_table_file(args.table_file)
    module_name = args.table_module or config.table_module
    if module_name is None:
        raise EmbedFsError(
            "No asset table configured. "
            "Pass --table-file, --table-module, or set EMBEDFS_TABLE_MODULE."
        )
    return load_asset_table(module_name)
