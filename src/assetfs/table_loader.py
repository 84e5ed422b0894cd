"""Generated asset module loader.

This module imports generated asset modules and validates their
``ASSET_DATA`` literal before building an asset table.
"""

from __future__ import annotations

import importlib
import importlib.util
from pathlib import Path
from types import ModuleType

from assetfs.asset_table import AssetTable
from core.constants import ASSET_DATA_ATTRIBUTE
from core.errors import AssetTableError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def load_asset_table(module_name: str) -> AssetTable:
    """Import a generated asset module by dotted name.

    Args:
        module_name: Importable module name.

    Returns:
        Asset table built from the module's data.

    Raises:
        AssetTableError: If the module cannot be imported or is malformed.
    """
    try:
        module = importlib.import_module(module_name)
    except ImportError as error:
        raise AssetTableError(
            f"Failed to import asset module {module_name}: {error}. "
            "Check the module name and PYTHONPATH."
        ) from error
    return table_from_module(module)


def load_asset_table_file(module_path: str | Path) -> AssetTable:
    """Load a generated asset module from a file path.

    Args:
        module_path: Path to the generated Python module.

    Returns:
        Asset table built from the module's data.

    Raises:
        AssetTableError: If the file is missing or malformed.
    """
    resolved_path = Path(module_path).expanduser().resolve()
    if not resolved_path.is_file():
        raise AssetTableError(
            f"Asset module not found at {resolved_path}. "
            "Generate it with 'embedfs generate' or pass a valid path."
        )
    spec = importlib.util.spec_from_file_location("embedfs_generated_assets", str(resolved_path))
    if spec is None or spec.loader is None:
        raise AssetTableError(
            f"Failed to load asset module at {resolved_path}. Verify the file path and syntax."
        )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return table_from_module(module)


def table_from_module(module: ModuleType) -> AssetTable:
    """Build an asset table from a loaded generated module."""
    data = getattr(module, ASSET_DATA_ATTRIBUTE, None)
    if not isinstance(data, dict):
        raise AssetTableError(
            f"Invalid asset module {module.__name__}: "
            f"missing dict {ASSET_DATA_ATTRIBUTE}."
        )
    table = AssetTable.from_entries(data)
    _LOGGER.debug("asset_table_loaded", module=module.__name__, asset_count=len(table))
    return table
