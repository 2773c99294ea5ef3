"""Blob sizing utilities.

This module provides functions to calculate how many blobs, and how many wire
bytes, a payload will take without actually packing it.
"""

from __future__ import annotations

from ..codec.blobs import blob_count
from ..packer import Strategy, get_packer


def blobs_needed(length: int, strategy: Strategy = "naive") -> int:
    """Calculate the number of blobs a payload of `length` bytes packs into.

    Args:
        length: Payload length in bytes
        strategy: Packing strategy name

    Returns:
        Blob count

    Raises:
        DataLengthError: If length is zero or exceeds the strategy's limit

    Example:
        >>> blobs_needed(31, "naive")
        1
        >>> blobs_needed(31_501, "naive")
        2
    """
    packer = get_packer(strategy)
    packer.check_length(length)
    return blob_count(length, packer.layout)


def encoded_size(length: int, strategy: Strategy = "naive") -> int:
    """Calculate the wire size in bytes of the blobs for a payload.

    Args:
        length: Payload length in bytes
        strategy: Packing strategy name

    Returns:
        Total size of all blobs in bytes

    Example:
        >>> encoded_size(100, "tight")
        131072
    """
    return blobs_needed(length, strategy) * get_packer(strategy).blob_size_bytes


def capacity_report(strategy: Strategy = "naive") -> dict[str, int | float]:
    """Get the capacity constants of a strategy.

    Args:
        strategy: Packing strategy name

    Returns:
        Dictionary of capacity figures, plus overhead as a fraction

    Example:
        >>> capacity_report("naive")["usable_bytes_per_blob"]
        31496
    """
    layout = get_packer(strategy).layout
    return {
        "field_elements_per_blob": layout.field_elements_per_blob,
        "usable_bits_per_field_element": layout.usable_bits_per_field_element,
        "reserved_bits_per_field_element": layout.reserved_bits_per_field_element,
        "usable_bytes_per_blob": layout.usable_bytes_per_blob,
        "blob_size_bytes": layout.blob_size_bytes,
        "max_blobs_per_tx": layout.max_blobs_per_tx,
        "max_useful_bytes_per_tx": layout.max_useful_bytes_per_tx,
        "overhead": layout.overhead,
    }
