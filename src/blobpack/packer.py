"""Packer facade.

Public entry points for packing bytes into blobs and unpacking them again.
Both strategies share the same pipeline and differ only in their codec:

    raw bytes -> size check -> pad -> split per blob -> encode each -> blobs
    blobs -> decode each -> join -> unpad -> raw bytes
"""

from __future__ import annotations

import logging
from typing import Literal, Sequence, Union

from .codec.blobs import assemble_blobs, disassemble_blobs
from .codec.field_element import FieldElementCodec, NaiveCodec, TightCodec
from .exceptions import DataLengthError

log = logging.getLogger(__name__)

Strategy = Literal["naive", "tight"]
BytesLike = Union[bytes, bytearray, memoryview]


class Packer:
    """Packs and unpacks payloads with one field-element codec.

    Example:
        >>> packer = Packer(TightCodec())
        >>> blobs = packer.pack(b"hello")
        >>> len(blobs), len(blobs[0]) == packer.blob_size_bytes
        (1, True)
        >>> packer.unpack(blobs)
        b'hello'
    """

    def __init__(self, codec: FieldElementCodec) -> None:
        self.codec = codec
        self.layout = codec.layout

    @property
    def name(self) -> str:
        return self.layout.name

    @property
    def usable_bytes_per_blob(self) -> int:
        return self.layout.usable_bytes_per_blob

    @property
    def max_useful_bytes_per_tx(self) -> int:
        return self.layout.max_useful_bytes_per_tx

    @property
    def blob_size_bytes(self) -> int:
        return self.layout.blob_size_bytes

    @property
    def field_elements_per_blob(self) -> int:
        return self.layout.field_elements_per_blob

    @property
    def max_blobs_per_tx(self) -> int:
        return self.layout.max_blobs_per_tx

    def check_length(self, length: int) -> None:
        """Validate a payload length against this strategy's limits.

        Raises:
            DataLengthError: If length is zero or above max_useful_bytes_per_tx
        """
        if length == 0:
            raise DataLengthError("Cannot pack empty data")

        if length > self.max_useful_bytes_per_tx:
            raise DataLengthError(
                f"{length} bytes exceeds the {self.name} limit of "
                f"{self.max_useful_bytes_per_tx} bytes per transaction"
            )

    def pack(self, data: BytesLike) -> list[bytes]:
        """Pack data into a sequence of blobs.

        Args:
            data: Raw payload (1..max_useful_bytes_per_tx bytes)

        Returns:
            List of 1..max_blobs_per_tx blobs, each blob_size_bytes long

        Raises:
            DataLengthError: If data is empty or too large
        """
        try:
            self.check_length(memoryview(data).nbytes)
        except DataLengthError as e:
            log.warning("Rejected %s pack: %s", self.name, e)
            raise
        return assemble_blobs(bytes(data), self.codec)

    def unpack(self, blobs: Sequence[BytesLike]) -> bytes:
        """Recover the original payload from a blob sequence.

        Args:
            blobs: Blobs produced by pack(), in order

        Returns:
            Original payload

        Raises:
            UnpadError: If a blob is truncated or no valid padding marker is found
        """
        return disassemble_blobs([bytes(blob) for blob in blobs], self.codec)

    def __repr__(self) -> str:
        return f"Packer({self.codec!r})"


NAIVE_PACKER = Packer(NaiveCodec())
TIGHT_PACKER = Packer(TightCodec())

_PACKERS: dict[str, Packer] = {
    "naive": NAIVE_PACKER,
    "tight": TIGHT_PACKER,
}


def get_packer(strategy: Strategy) -> Packer:
    """Return the packer for a strategy name.

    Raises:
        ValueError: If the strategy is unknown
    """
    try:
        return _PACKERS[strategy]
    except KeyError:
        raise ValueError(
            f"Invalid strategy: {strategy!r}. Must be one of {sorted(_PACKERS)}"
        ) from None


def pack(data: BytesLike, *, strategy: Strategy = "naive") -> list[bytes]:
    """Pack data into blobs with the named strategy.

    Example:
        >>> blobs = pack(b"Hello, blobs!", strategy="tight")
        >>> unpack(blobs, strategy="tight")
        b'Hello, blobs!'
    """
    return get_packer(strategy).pack(data)


def unpack(blobs: Sequence[BytesLike], *, strategy: Strategy = "naive") -> bytes:
    """Unpack blobs produced by pack() with the same strategy."""
    return get_packer(strategy).unpack(blobs)
