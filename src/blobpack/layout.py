"""Blob geometry for a packing strategy.

This module provides the BlobLayout model that describes how many field
elements a blob holds and how many bits of each element carry payload.
All capacity figures used by the codecs are derived from it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    BYTES_PER_FIELD_ELEMENT,
    MAX_BLOBS_PER_TX,
    NAIVE_FIELD_ELEMENTS_PER_BLOB,
    NAIVE_USABLE_BITS_PER_FIELD_ELEMENT,
    TIGHT_FIELD_ELEMENTS_PER_BLOB,
    TIGHT_USABLE_BITS_PER_FIELD_ELEMENT,
)


class BlobLayout(BaseModel):
    """Capacity description of one packing strategy.

    Layouts are immutable and validated on construction. The two canonical
    layouts are NAIVE_LAYOUT and TIGHT_LAYOUT; smaller custom layouts are
    handy for exercising multi-blob paths cheaply.

    Example:
        >>> layout = BlobLayout(name="tiny", field_elements_per_blob=4,
        ...                     usable_bits_per_field_element=254)
        >>> layout.usable_bytes_per_blob
        127
        >>> layout.blob_size_bytes
        128

    Attributes:
        name: Strategy name, used in logs and reports
        field_elements_per_blob: Number of field elements in one blob
        usable_bits_per_field_element: Payload bits per element (high-order, MSB-first)
        bytes_per_field_element: Wire size of one element
        max_blobs_per_tx: Max blobs one transaction may carry
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    field_elements_per_blob: int = Field(ge=1)
    usable_bits_per_field_element: int = Field(ge=1, le=256)
    bytes_per_field_element: int = Field(default=BYTES_PER_FIELD_ELEMENT, ge=1, le=32)
    max_blobs_per_tx: int = Field(default=MAX_BLOBS_PER_TX, ge=1)

    @model_validator(mode="after")
    def _check_geometry(self) -> BlobLayout:
        if self.usable_bits_per_field_element > self.bits_per_field_element:
            raise ValueError(
                f"usable_bits_per_field_element ({self.usable_bits_per_field_element}) "
                f"exceeds element width ({self.bits_per_field_element} bits)"
            )
        usable_bits = self.usable_bits_per_field_element * self.field_elements_per_blob
        if usable_bits % 8:
            raise ValueError(
                f"{usable_bits} usable bits per blob is not a whole number of bytes"
            )
        return self

    @property
    def bits_per_field_element(self) -> int:
        return self.bytes_per_field_element * 8

    @property
    def reserved_bits_per_field_element(self) -> int:
        """Low-order bits of every element that are always zero."""
        return self.bits_per_field_element - self.usable_bits_per_field_element

    @property
    def byte_aligned(self) -> bool:
        return self.usable_bits_per_field_element % 8 == 0

    @property
    def usable_bytes_per_blob(self) -> int:
        return (self.usable_bits_per_field_element * self.field_elements_per_blob) // 8

    @property
    def blob_size_bytes(self) -> int:
        return self.bytes_per_field_element * self.field_elements_per_blob

    @property
    def max_useful_bytes_per_tx(self) -> int:
        """Largest payload a transaction can carry; one byte goes to the padding marker."""
        return self.usable_bytes_per_blob * self.max_blobs_per_tx - 1

    @property
    def overhead(self) -> float:
        """Extra wire bytes per payload byte (e.g. 0.032 for naive packing)."""
        return self.blob_size_bytes / self.usable_bytes_per_blob - 1


NAIVE_LAYOUT = BlobLayout(
    name="naive",
    field_elements_per_blob=NAIVE_FIELD_ELEMENTS_PER_BLOB,
    usable_bits_per_field_element=NAIVE_USABLE_BITS_PER_FIELD_ELEMENT,
)

TIGHT_LAYOUT = BlobLayout(
    name="tight",
    field_elements_per_blob=TIGHT_FIELD_ELEMENTS_PER_BLOB,
    usable_bits_per_field_element=TIGHT_USABLE_BITS_PER_FIELD_ELEMENT,
)
