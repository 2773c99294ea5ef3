"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import random

import pytest

from blobpack import BlobLayout, NaiveCodec, Packer, TightCodec


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for payload bytes."""
    return random.Random(4844)


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, blob-carrying world!"


@pytest.fixture
def tiny_tight_layout() -> BlobLayout:
    """Four 254-bit field elements per blob: 127 usable bytes."""
    return BlobLayout(name="tiny-tight", field_elements_per_blob=4, usable_bits_per_field_element=254)


@pytest.fixture
def tiny_naive_layout() -> BlobLayout:
    """Four 31-byte field elements per blob: 124 usable bytes."""
    return BlobLayout(name="tiny-naive", field_elements_per_blob=4, usable_bits_per_field_element=248)


@pytest.fixture
def tiny_tight_packer(tiny_tight_layout: BlobLayout) -> Packer:
    return Packer(TightCodec(tiny_tight_layout))


@pytest.fixture
def tiny_naive_packer(tiny_naive_layout: BlobLayout) -> Packer:
    return Packer(NaiveCodec(tiny_naive_layout))
