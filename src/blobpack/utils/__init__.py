"""Utility functions for blobpack.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import blobs_needed, capacity_report, encoded_size

__all__ = [
    "blobs_needed",
    "encoded_size",
    "capacity_report",
]
