"""Asset module generator.

This module walks source directories and renders a Python module whose
``ASSET_DATA`` literal embeds every file as compressed payload text.
Runtime code loads the result through ``assetfs.table_loader``.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from assetfs.asset_path import canonicalize_path
from assetfs.payload_codec import encode_payload
from core.constants import ASSET_DATA_ATTRIBUTE
from core.errors import AssetGenerateError
from core.logging_config import get_logger
from core.types import GenerateOptions

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedEntry:
    """One entry rendered into the generated module."""

    path: str
    local_path: str
    size: int
    mod_time: int
    is_dir: bool
    compressed: str


def collect_entries(options: GenerateOptions) -> list[GeneratedEntry]:
    """Walk source directories and build sorted entries.

    Args:
        options: Generation options.

    Returns:
        Entries sorted by virtual path.

    Raises:
        AssetGenerateError: If a source is missing or two files share a path.
    """
    ignore = _compile_pattern("ignore", options.ignore)
    include = _compile_pattern("include", options.include)
    entries: dict[str, GeneratedEntry] = {}
    for source_dir in options.source_dirs:
        source_path = Path(source_dir)
        if not source_path.is_dir():
            raise AssetGenerateError(
                f"Asset source directory not found at {source_path}. "
                "Pass existing directories to generate."
            )
        for directory, dir_names, file_names in os.walk(source_path):
            dir_names.sort()
            directory_path = Path(directory)
            local_dir = directory_path.as_posix()
            if ignore is not None and ignore.search(local_dir):
                dir_names.clear()
                continue
            _add_entry(entries, _directory_entry(options, directory_path))
            for file_name in sorted(file_names):
                local_file = (directory_path / file_name).as_posix()
                if ignore is not None and ignore.search(local_file):
                    continue
                if include is not None and not include.search(local_file):
                    continue
                _add_entry(entries, _file_entry(options, directory_path / file_name))
    return [entries[path] for path in sorted(entries)]


def generate_asset_module(options: GenerateOptions) -> str:
    """Render generated module source for the configured sources.

    Args:
        options: Generation options.

    Returns:
        Python module source text.
    """
    entries = collect_entries(options)
    lines = ['"""Generated embedded assets. Do not edit."""', ""]
    if options.package_comment:
        lines.extend(f"# {line}" for line in options.package_comment.splitlines())
        lines.append("")
    lines.append(f"{ASSET_DATA_ATTRIBUTE} = {{")
    for entry in entries:
        lines.extend(_render_entry(entry))
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_asset_module(options: GenerateOptions, output_path: str | Path) -> Path:
    """Generate and write an asset module.

    Args:
        options: Generation options.
        output_path: Destination ``.py`` path.

    Returns:
        Resolved output path.
    """
    resolved_path = Path(output_path).expanduser().resolve()
    source = generate_asset_module(options)
    resolved_path.parent.mkdir(parents=True, exist_ok=True)
    resolved_path.write_text(source, encoding="utf-8")
    _LOGGER.info(
        "asset_module_written",
        output_path=str(resolved_path),
        source_dirs=list(options.source_dirs),
    )
    return resolved_path


def _compile_pattern(option_name: str, pattern: str | None) -> re.Pattern[str] | None:
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as error:
        raise AssetGenerateError(
            f"Invalid {option_name} pattern {pattern!r}: {error}. Provide a valid regex."
        ) from error


def _virtual_path(options: GenerateOptions, local_path: str) -> str:
    relative = local_path
    if options.strip_prefix and relative.startswith(options.strip_prefix):
        relative = relative[len(options.strip_prefix) :]
    return canonicalize_path(relative)


def _directory_entry(options: GenerateOptions, directory_path: Path) -> GeneratedEntry:
    local_path = directory_path.as_posix()
    try:
        observed_mtime = directory_path.stat().st_mtime
    except OSError as error:
        raise AssetGenerateError(
            f"Failed to read asset source directory {directory_path}: {error.strerror}. "
            "Check directory permissions."
        ) from error
    return GeneratedEntry(
        path=_virtual_path(options, local_path),
        local_path=local_path,
        size=0,
        mod_time=options.resolved_mod_time(observed_mtime),
        is_dir=True,
        compressed="",
    )


def _file_entry(options: GenerateOptions, file_path: Path) -> GeneratedEntry:
    local_path = file_path.as_posix()
    try:
        raw = file_path.read_bytes()
        observed_mtime = file_path.stat().st_mtime
    except OSError as error:
        raise AssetGenerateError(
            f"Failed to read asset source {file_path}: {error.strerror}. "
            "Check file permissions."
        ) from error
    return GeneratedEntry(
        path=_virtual_path(options, local_path),
        local_path=local_path,
        size=len(raw),
        mod_time=options.resolved_mod_time(observed_mtime),
        is_dir=False,
        compressed=encode_payload(raw) if raw else "",
    )


def _add_entry(entries: dict[str, GeneratedEntry], entry: GeneratedEntry) -> None:
    existing = entries.get(entry.path)
    if existing is None:
        entries[entry.path] = entry
        return
    if existing.local_path == entry.local_path or (existing.is_dir and entry.is_dir):
        return
    raise AssetGenerateError(
        f"Asset path {entry.path} is produced by both {existing.local_path} "
        f"and {entry.local_path}. Adjust strip_prefix or the source directories."
    )


def _render_entry(entry: GeneratedEntry) -> list[str]:
    lines = [
        f"    {entry.path!r}: {{",
        f"        'local': {entry.local_path!r},",
        f"        'size': {entry.size},",
        f"        'modtime': {entry.mod_time},",
    ]
    if entry.is_dir:
        lines.append("        'is_dir': True,")
    if entry.compressed:
        lines.append("        'compressed': '''")
        lines.append(entry.compressed)
        lines.append("''',")
    lines.append("    },")
    return lines
