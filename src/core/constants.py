"""Core constants used across embedfs modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

import stat

ROOT_PATH = "/"
PATH_SEPARATOR = "/"
ASSET_DATA_ATTRIBUTE = "ASSET_DATA"
EMBEDDED_FILE_MODE = stat.S_IFREG | 0o444
EMBEDDED_DIR_MODE = stat.S_IFDIR | 0o555
PAYLOAD_LINE_WIDTH = 76
PAYLOAD_GZIP_MTIME = 0
PAYLOAD_COMPRESS_LEVEL = 9
DEFAULT_TEXT_ENCODING = "utf-8"
DEFAULT_MOD_TIME = 0
READ_CHUNK_SIZE = 64 * 1024
TRUE_ENV_VALUES = ("1", "true", "yes", "on")
FALSE_ENV_VALUES = ("0", "false", "no", "off", "")
