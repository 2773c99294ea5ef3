"""Capacity constants for both packing strategies.

Only the base values are literals; everything else is derived from them.
"""

from __future__ import annotations

#: Wire size of one field element.
BYTES_PER_FIELD_ELEMENT = 32
BITS_PER_FIELD_ELEMENT = BYTES_PER_FIELD_ELEMENT * 8

#: Max number of blobs carried by one transaction.
MAX_BLOBS_PER_TX = 2

#: Byte written right after the last payload byte.
PADDING_MARKER = 0x80

# Naive (byte-aligned) packing: 31 of 32 bytes per field element.
NAIVE_FIELD_ELEMENTS_PER_BLOB = 1016
NAIVE_USABLE_BITS_PER_FIELD_ELEMENT = 248
NAIVE_USABLE_BYTES_PER_BLOB = (NAIVE_USABLE_BITS_PER_FIELD_ELEMENT // 8) * NAIVE_FIELD_ELEMENTS_PER_BLOB
NAIVE_BLOB_SIZE = BYTES_PER_FIELD_ELEMENT * NAIVE_FIELD_ELEMENTS_PER_BLOB
# One byte is reserved for the padding marker.
NAIVE_MAX_USEFUL_BYTES_PER_TX = NAIVE_USABLE_BYTES_PER_BLOB * MAX_BLOBS_PER_TX - 1

# Tight (bit-aligned) packing: 254 of 256 bits per field element.
TIGHT_FIELD_ELEMENTS_PER_BLOB = 4096
TIGHT_USABLE_BITS_PER_FIELD_ELEMENT = 254
TIGHT_USABLE_BYTES_PER_BLOB = (TIGHT_USABLE_BITS_PER_FIELD_ELEMENT * TIGHT_FIELD_ELEMENTS_PER_BLOB) // 8
TIGHT_BLOB_SIZE = BYTES_PER_FIELD_ELEMENT * TIGHT_FIELD_ELEMENTS_PER_BLOB
TIGHT_MAX_USEFUL_BYTES_PER_TX = TIGHT_USABLE_BYTES_PER_BLOB * MAX_BLOBS_PER_TX - 1

__all__ = [
    "BYTES_PER_FIELD_ELEMENT",
    "BITS_PER_FIELD_ELEMENT",
    "MAX_BLOBS_PER_TX",
    "PADDING_MARKER",
    "NAIVE_FIELD_ELEMENTS_PER_BLOB",
    "NAIVE_USABLE_BITS_PER_FIELD_ELEMENT",
    "NAIVE_USABLE_BYTES_PER_BLOB",
    "NAIVE_BLOB_SIZE",
    "NAIVE_MAX_USEFUL_BYTES_PER_TX",
    "TIGHT_FIELD_ELEMENTS_PER_BLOB",
    "TIGHT_USABLE_BITS_PER_FIELD_ELEMENT",
    "TIGHT_USABLE_BYTES_PER_BLOB",
    "TIGHT_BLOB_SIZE",
    "TIGHT_MAX_USEFUL_BYTES_PER_TX",
]
