"""Field-element encoders and decoders.

Each codec turns one blob's worth of usable payload bytes into the wire layout
of one blob (a run of fixed-size field elements whose low-order reserved bits
are zero) and back. The two strategies differ only here and in their layout:

- NaiveCodec: bytes 0-30 of each 32-byte element carry payload, byte 31 is 0x00.
- TightCodec: bits 0-253 (MSB-first) carry payload, bits 254-255 are 0.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..layout import NAIVE_LAYOUT, TIGHT_LAYOUT, BlobLayout
from .bitpack import BitPacker, BitUnpacker


class FieldElementCodec(ABC):
    """Strategy capability: encode and decode a single blob.

    Subclasses must be stateless apart from their layout, so one instance can
    encode blobs from several threads at once.
    """

    def __init__(self, layout: BlobLayout) -> None:
        self.layout = layout

    @property
    def name(self) -> str:
        return self.layout.name

    def encode_blob(self, chunk: bytes) -> bytes:
        """Encode one usable-bytes-per-blob chunk into one blob.

        Args:
            chunk: Exactly layout.usable_bytes_per_blob bytes

        Returns:
            Exactly layout.blob_size_bytes bytes

        Raises:
            ValueError: If chunk has the wrong size
        """
        if len(chunk) != self.layout.usable_bytes_per_blob:
            raise ValueError(
                f"{self.name} chunk must be {self.layout.usable_bytes_per_blob} bytes, "
                f"got {len(chunk)}"
            )
        return self._encode(chunk)

    def decode_blob(self, blob: bytes) -> bytes:
        """Decode one blob back into its usable payload bytes.

        Reserved bits are discarded without being checked.

        Args:
            blob: Exactly layout.blob_size_bytes bytes

        Returns:
            Exactly layout.usable_bytes_per_blob bytes

        Raises:
            ValueError: If blob has the wrong size
        """
        if len(blob) != self.layout.blob_size_bytes:
            raise ValueError(
                f"{self.name} blob must be {self.layout.blob_size_bytes} bytes, got {len(blob)}"
            )
        return self._decode(blob)

    @abstractmethod
    def _encode(self, chunk: bytes) -> bytes: ...

    @abstractmethod
    def _decode(self, blob: bytes) -> bytes: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(layout={self.layout.name!r})"


class NaiveCodec(FieldElementCodec):
    """Byte-aligned packing: whole payload bytes followed by zero bytes per element."""

    def __init__(self, layout: BlobLayout = NAIVE_LAYOUT) -> None:
        if not layout.byte_aligned:
            raise ValueError(
                f"NaiveCodec needs whole usable bytes per element, "
                f"got {layout.usable_bits_per_field_element} bits"
            )
        super().__init__(layout)

    def _encode(self, chunk: bytes) -> bytes:
        step = self.layout.usable_bits_per_field_element // 8
        filler = bytes(self.layout.bytes_per_field_element - step)
        return b"".join(
            chunk[i : i + step] + filler for i in range(0, len(chunk), step)
        )

    def _decode(self, blob: bytes) -> bytes:
        step = self.layout.usable_bits_per_field_element // 8
        width = self.layout.bytes_per_field_element
        return b"".join(blob[i : i + step] for i in range(0, len(blob), width))


class TightCodec(FieldElementCodec):
    """Bit-aligned packing: the chunk is one MSB-first bitstream cut into groups.

    Group boundaries generally fall inside bytes, so every group goes through
    the bit cursor rather than byte slicing.
    """

    def __init__(self, layout: BlobLayout = TIGHT_LAYOUT) -> None:
        super().__init__(layout)

    def _encode(self, chunk: bytes) -> bytes:
        usable = self.layout.usable_bits_per_field_element
        reserved = self.layout.reserved_bits_per_field_element

        reader = BitUnpacker(chunk)
        packer = BitPacker()
        for _ in range(self.layout.field_elements_per_blob):
            packer.write_uint(reader.read_uint(usable), usable)
            if reserved:
                packer.write_uint(0, reserved)
        return packer.to_bytes()

    def _decode(self, blob: bytes) -> bytes:
        usable = self.layout.usable_bits_per_field_element
        width = self.layout.bits_per_field_element

        reader = BitUnpacker(blob)
        packer = BitPacker()
        for i in range(self.layout.field_elements_per_blob):
            reader.seek(i * width)
            packer.write_uint(reader.read_uint(usable), usable)
        return packer.to_bytes()
