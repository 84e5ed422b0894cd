"""Asset record descriptors.

This module defines the immutable per-asset descriptor generated at build
time, plus its lazily materialized content.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from assetfs.decode_gate import DecodeGate, GateState
from assetfs.payload_codec import decode_payload
from core.constants import EMBEDDED_DIR_MODE, EMBEDDED_FILE_MODE
from core.errors import AssetDecodeError, AssetTableError
from core.logging_config import get_logger
from core.types import AssetStat

_LOGGER = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class AssetRecord:
    """Descriptor for one embedded file or directory.

    Attributes:
        path: Canonical slash-rooted asset path.
        size: Uncompressed byte length; zero means no payload.
        mod_time: Modification time in seconds since epoch.
        local_path: Real filesystem path used by the local backing.
        is_dir: Whether the entry is a directory.
        compressed: Base64 text of the compressed payload.
    """

    path: str
    size: int
    mod_time: int
    local_path: str
    is_dir: bool = False
    compressed: str = ""
    _gate: DecodeGate = field(default_factory=DecodeGate, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise AssetTableError(
                f"Invalid asset record {self.path}: size must be non-negative, got {self.size}."
            )
        if self.is_dir and (self.size or self.compressed):
            raise AssetTableError(
                f"Invalid asset record {self.path}: directories cannot carry a payload."
            )
        if self.size and not self.compressed:
            raise AssetTableError(
                f"Invalid asset record {self.path}: "
                f"size is {self.size} but no compressed payload is present."
            )

    @property
    def mode(self) -> int:
        """Return the synthetic file mode for embedded reads."""
        return EMBEDDED_DIR_MODE if self.is_dir else EMBEDDED_FILE_MODE

    @property
    def decode_state(self) -> GateState:
        """Return the lifecycle state of the decoded content."""
        return self._gate.state

    def materialize(self) -> bytes:
        """Return decoded content, decoding on first use.

        Returns:
            Decoded bytes shared by every caller.

        Raises:
            AssetDecodeError: If the payload is corrupt. The same error is
                raised again on every later call.
        """
        if self.size == 0 or self.is_dir:
            return b""
        return self._gate.run(self._decode)

    def stat(self, name: str) -> AssetStat:
        """Build embedded file metadata under the given base name."""
        return AssetStat(
            name=name,
            size=self.size,
            mode=self.mode,
            mod_time=self.mod_time,
            is_dir=self.is_dir,
        )

    def _decode(self) -> bytes:
        try:
            data = decode_payload(self.compressed, self.size)
        except AssetDecodeError as error:
            _LOGGER.debug("asset_decode_failed", path=self.path, error=str(error))
            raise AssetDecodeError(f"Asset {self.path}: {error}") from error
        _LOGGER.debug("asset_decoded", path=self.path, size=len(data))
        return data
