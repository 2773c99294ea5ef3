"""Blob codec for blobpack.

This module provides the building blocks of the packing pipeline: the bit
cursor, the padding codec, per-strategy field-element codecs and the blob
assembler.
"""

from __future__ import annotations

from .bitpack import BitPacker, BitUnpacker
from .blobs import assemble_blobs, blob_count, disassemble_blobs
from .field_element import FieldElementCodec, NaiveCodec, TightCodec
from .padding import pad, unpad

__all__ = [
    "BitPacker",
    "BitUnpacker",
    "pad",
    "unpad",
    "FieldElementCodec",
    "NaiveCodec",
    "TightCodec",
    "assemble_blobs",
    "disassemble_blobs",
    "blob_count",
]
