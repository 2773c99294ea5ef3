"""blobpack: EIP-4844 style blob packing

A Python library that packs an arbitrary byte buffer into the minimum number
of fixed-size blobs of field elements, and recovers it again.

Two strategies are available:
- naive: 31 of the 32 bytes of each field element, byte-aligned (~3% overhead)
- tight: 254 of the 256 bits of each field element, bit-aligned

Quick Start:
    >>> from blobpack import pack, unpack
    >>> blobs = pack(b"some rollup batch", strategy="tight")
    >>> len(blobs)
    1
    >>> unpack(blobs, strategy="tight")
    b'some rollup batch'
"""

from __future__ import annotations

from .codec import NaiveCodec, TightCodec
from .exceptions import DataLengthError, PackingError, UnpadError
from .layout import NAIVE_LAYOUT, TIGHT_LAYOUT, BlobLayout
from .packer import NAIVE_PACKER, TIGHT_PACKER, Packer, Strategy, get_packer, pack, unpack
from .utils import blobs_needed, capacity_report, encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "pack",
    "unpack",
    "Packer",
    "Strategy",
    "get_packer",
    "NAIVE_PACKER",
    "TIGHT_PACKER",
    # Layouts and codecs
    "BlobLayout",
    "NAIVE_LAYOUT",
    "TIGHT_LAYOUT",
    "NaiveCodec",
    "TightCodec",
    # Exceptions
    "PackingError",
    "DataLengthError",
    "UnpadError",
    # Sizing
    "blobs_needed",
    "encoded_size",
    "capacity_report",
    # Version
    "__version__",
]
