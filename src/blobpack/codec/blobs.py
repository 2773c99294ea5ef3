"""Blob assembler and disassembler.

Turns a payload into the sequence of blobs that carries it, and back. Blobs
are independent of each other: blob i depends only on padded chunk i.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..exceptions import UnpadError
from ..layout import BlobLayout
from .field_element import FieldElementCodec
from .padding import pad, unpad

log = logging.getLogger(__name__)


def blob_count(length: int, layout: BlobLayout) -> int:
    """Return the number of blobs needed for a payload of `length` bytes.

    The padding marker is counted, so a payload that exactly fills k blobs
    needs k + 1 of them.

    Args:
        length: Payload length in bytes
        layout: Blob layout of the strategy

    Returns:
        Blob count (at least 1)
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return -(-(length + 1) // layout.usable_bytes_per_blob)


def assemble_blobs(data: bytes, codec: FieldElementCodec) -> list[bytes]:
    """Pad data and encode it into a list of blobs.

    Size limits are not checked here; see Packer.pack().

    Args:
        data: Raw payload
        codec: Field-element codec of the strategy

    Returns:
        Blobs in payload order
    """
    layout = codec.layout
    n_blobs = blob_count(len(data), layout)
    padded = pad(data, n_blobs, layout.usable_bytes_per_blob)
    log.debug(
        "Packing %d bytes into %d %s blob(s) (%d padded bytes)",
        len(data),
        n_blobs,
        layout.name,
        len(padded),
    )

    step = layout.usable_bytes_per_blob
    return [codec.encode_blob(padded[i * step : (i + 1) * step]) for i in range(n_blobs)]


def disassemble_blobs(blobs: Sequence[bytes], codec: FieldElementCodec) -> bytes:
    """Decode a blob sequence and strip its padding.

    Args:
        blobs: Blobs in payload order
        codec: Field-element codec the blobs were produced with

    Returns:
        Original payload

    Raises:
        UnpadError: If a blob has the wrong size or no valid padding marker is found
    """
    layout = codec.layout
    chunks = []
    for index, blob in enumerate(blobs):
        if len(blob) != layout.blob_size_bytes:
            raise UnpadError(
                f"Blob {index} is {len(blob)} bytes, expected {layout.blob_size_bytes} "
                f"for {layout.name} packing"
            )
        chunks.append(codec.decode_blob(blob))

    log.debug("Decoded %d %s blob(s)", len(chunks), layout.name)
    return unpad(b"".join(chunks))
