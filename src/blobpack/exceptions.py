"""Exception hierarchy for blobpack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PackingError for easy catching of any blobpack-specific error.
"""

from __future__ import annotations


class PackingError(Exception):
    """Base exception for all blobpack errors."""

    pass


class DataLengthError(PackingError):
    """Raised when input data violates a size precondition.

    Detected before any padding or encoding work is done.

    Examples:
        - Empty payload
        - Payload larger than the strategy's max useful bytes per transaction
        - Payload that leaves no room for the padding marker
    """

    pass


class UnpadError(PackingError):
    """Raised when the padding marker cannot be located while unpacking.

    Examples:
        - Non-zero byte other than 0x80 found in the zero-fill region
        - No 0x80 marker at all (all-zero or empty input)
        - Truncated blob (wrong wire size)
    """

    pass
