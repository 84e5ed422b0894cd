"""Embedded payload encoding and decoding.

Payloads are gzip-compressed bytes stored as line-wrapped base64 text.
Decoding also accepts zlib framing, and verifies the stream is complete
and yields the recorded uncompressed size.
"""

from __future__ import annotations

import base64
import binascii
import gzip
import zlib

from core.constants import PAYLOAD_COMPRESS_LEVEL, PAYLOAD_GZIP_MTIME, PAYLOAD_LINE_WIDTH
from core.errors import AssetDecodeError

# Auto-detect gzip or zlib headers.
_AUTO_HEADER_WBITS = 32 + zlib.MAX_WBITS


def decode_payload(encoded: str, expected_size: int) -> bytes:
    """Decode a base64 text payload and inflate it.

    Args:
        encoded: Base64 text, possibly wrapped across lines.
        expected_size: Uncompressed byte length recorded for the asset.

    Returns:
        Decompressed payload bytes.

    Raises:
        AssetDecodeError: If base64, the compressed stream, or the
            resulting length is invalid.
    """
    compact = "".join(encoded.split())
    try:
        compressed = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as error:
        raise AssetDecodeError(
            f"Failed to decode asset payload: invalid base64 ({error}). "
            "Regenerate the asset module from source files."
        ) from error
    decompressor = zlib.decompressobj(wbits=_AUTO_HEADER_WBITS)
    try:
        data = decompressor.decompress(compressed) + decompressor.flush()
    except zlib.error as error:
        raise AssetDecodeError(
            f"Failed to inflate asset payload: {error}. "
            "Regenerate the asset module from source files."
        ) from error
    if not decompressor.eof:
        raise AssetDecodeError(
            "Failed to inflate asset payload: compressed stream is truncated. "
            "Regenerate the asset module from source files."
        )
    if len(data) != expected_size:
        raise AssetDecodeError(
            "Failed to inflate asset payload: "
            f"expected {expected_size} bytes, got {len(data)}. "
            "Regenerate the asset module from source files."
        )
    return data


def encode_payload(raw: bytes) -> str:
    """Compress and base64-encode bytes as wrapped payload text.

    Args:
        raw: Uncompressed file content.

    Returns:
        Base64 text wrapped at a fixed line width.
    """
    compressed = gzip.compress(raw, compresslevel=PAYLOAD_COMPRESS_LEVEL, mtime=PAYLOAD_GZIP_MTIME)
    encoded = base64.b64encode(compressed).decode("ascii")
    lines = [
        encoded[start : start + PAYLOAD_LINE_WIDTH]
        for start in range(0, len(encoded), PAYLOAD_LINE_WIDTH)
    ]
    return "\n".join(lines)
