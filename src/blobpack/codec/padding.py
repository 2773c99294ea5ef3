"""Padding codec.

A payload is padded by writing a single 0x80 marker byte right after its last
byte and zero-filling up to a whole number of blobs' worth of usable bytes.
Unpadding scans back from the end for the marker.

Layout of a padded buffer of capacity C:

    [payload (n bytes)] [0x80] [0x00 * (C - n - 1)]
"""

from __future__ import annotations

import logging

from ..constants import PADDING_MARKER
from ..exceptions import DataLengthError, UnpadError

log = logging.getLogger(__name__)


def pad(payload: bytes, n_blobs: int, usable_bytes_per_blob: int) -> bytes:
    """Pad payload to fill exactly n_blobs blobs.

    Args:
        payload: Raw data
        n_blobs: Number of blobs the padded data must fill
        usable_bytes_per_blob: Payload capacity of one blob

    Returns:
        Padded data of length n_blobs * usable_bytes_per_blob

    Raises:
        DataLengthError: If the payload leaves no room for the marker byte
    """
    capacity = n_blobs * usable_bytes_per_blob
    if len(payload) >= capacity:
        raise DataLengthError(
            f"{len(payload)} bytes leave no room for the padding marker "
            f"in {n_blobs} blob(s) of {usable_bytes_per_blob} usable bytes"
        )

    padded = bytearray(capacity)
    padded[: len(payload)] = payload
    padded[len(payload)] = PADDING_MARKER
    return bytes(padded)


def unpad(padded: bytes) -> bytes:
    """Strip the marker and zero-fill added by pad().

    Args:
        padded: Padded data

    Returns:
        The original payload

    Raises:
        UnpadError: If the last non-zero byte is not 0x80, or there is none
    """
    stripped = bytes(padded).rstrip(b"\x00")
    if not stripped:
        log.debug("No padding marker in %d bytes of zeros", len(padded))
        raise UnpadError(f"No padding marker found in {len(padded)} bytes")

    marker_pos = len(stripped) - 1
    if stripped[marker_pos] != PADDING_MARKER:
        log.debug("Byte 0x%02x at offset %d where marker expected", stripped[marker_pos], marker_pos)
        raise UnpadError(
            f"Expected padding marker 0x{PADDING_MARKER:02x} at offset {marker_pos}, "
            f"found 0x{stripped[marker_pos]:02x}"
        )

    return stripped[:marker_pos]
