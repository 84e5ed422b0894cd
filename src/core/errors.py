"""Embedfs exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type so callers can classify failures.
"""

from __future__ import annotations


class EmbedFsError(Exception):
    """Base exception for all embedfs failures."""


class EmbedFsConfigError(EmbedFsError):
    """Raised for invalid runtime configuration."""


class AssetTableError(EmbedFsError):
    """Raised for malformed generated asset tables."""


class AssetNotFoundError(EmbedFsError, FileNotFoundError):
    """Raised when a path has no asset or no backing file."""


class AssetDecodeError(EmbedFsError):
    """Raised when an embedded payload cannot be decoded."""


class AssetGenerateError(EmbedFsError):
    """Raised for asset module generation failures."""
