"""Runtime configuration model for embedfs.

This module owns all environment variable parsing and validation.
The asset filesystem itself never reads the environment; callers such as
the CLI consume a typed config object and pass plain values inward.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import FALSE_ENV_VALUES, TRUE_ENV_VALUES
from core.errors import EmbedFsConfigError


@dataclass(frozen=True)
class EmbedFsConfig:
    """Validated runtime configuration.

    Attributes:
        use_local: Serve assets from local disk instead of embedded payloads.
        mount_prefix: Optional virtual root prepended to request paths.
        table_module: Optional dotted module name holding ASSET_DATA.
    """

    use_local: bool
    mount_prefix: str | None
    table_module: str | None

    @classmethod
    def from_env(cls) -> "EmbedFsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            EmbedFsConfigError: If environment values are invalid.
        """
        use_local = _parse_bool("EMBEDFS_USE_LOCAL", os.getenv("EMBEDFS_USE_LOCAL", "0"))
        mount_prefix = os.getenv("EMBEDFS_MOUNT_PREFIX") or None
        table_module = os.getenv("EMBEDFS_TABLE_MODULE") or None
        if mount_prefix is not None and not mount_prefix.startswith("/"):
            raise EmbedFsConfigError(
                "Invalid EMBEDFS_MOUNT_PREFIX value: "
                f"expected an absolute virtual path, got '{mount_prefix}'. "
                "Prefix the value with '/'."
            )
        return cls(
            use_local=use_local,
            mount_prefix=mount_prefix,
            table_module=table_module,
        )


def _parse_bool(variable: str, raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        variable: Environment variable name, used in errors.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        EmbedFsConfigError: If value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUE_ENV_VALUES:
        return True
    if normalized in FALSE_ENV_VALUES:
        return False
    raise EmbedFsConfigError(
        f"Invalid {variable} value: "
        f"expected boolean, got '{raw_value}'. "
        f"Set {variable} to one of {', '.join(TRUE_ENV_VALUES + FALSE_ENV_VALUES[:-1])}."
    )
