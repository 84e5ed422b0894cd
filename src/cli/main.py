"""Embedfs CLI entry points.
This module exposes commands for generating and inspecting asset modules.
It maps argparse commands onto asset filesystem calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from assetfs.table_generator import write_asset_module
from cli.read_commands import add_read_commands, run_cat_command, run_stat_command
from core.config import EmbedFsConfig
from core.errors import AssetGenerateError, EmbedFsConfigError
from core.types import GenerateOptions


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="embedfs", description="Embedded asset filesystem CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_generate_command(subparsers)
    add_read_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the embedfs CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "generate":
        return _run_generate_command(args)
    try:
        config = EmbedFsConfig.from_env()
    except EmbedFsConfigError as error:
        print(f"read_error={error}", file=sys.stderr)
        return 1
    if args.command == "cat":
        return run_cat_command(config, args)
    if args.command == "stat":
        return run_stat_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_generate_command(args: argparse.Namespace) -> int:
    """Handle generate command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = GenerateOptions(
        source_dirs=tuple(args.sources),
        strip_prefix=args.strip_prefix,
        ignore=args.ignore,
        include=args.include,
        mod_time=args.modtime,
        package_comment=args.comment,
    )
    try:
        output_path = write_asset_module(options, args.output)
    except AssetGenerateError as error:
        print(f"generate_error={error}")
        return 1
    print(output_path)
    return 0


def _add_generate_command(subparsers: Any) -> None:
    """Register generate subcommand."""
    parser = subparsers.add_parser(
        "generate",
        help="Embed source directories into a Python asset module",
    )
    parser.add_argument("sources", nargs="+", help="Source directories to embed")
    parser.add_argument("--output", required=True, help="Generated module path")
    parser.add_argument(
        "--strip-prefix",
        default="",
        help="Leading path removed from virtual asset paths",
    )
    parser.add_argument("--ignore", help="Regex of relative paths to skip")
    parser.add_argument("--include", help="Regex of file paths to embed")
    parser.add_argument("--modtime", type=int, help="Fixed modification time for every asset")
    parser.add_argument("--comment", help="Comment written at the top of the module")
