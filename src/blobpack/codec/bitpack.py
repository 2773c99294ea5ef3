"""Bit-level packing and unpacking utilities.

This module provides the bit cursor used by tight packing, where 254-bit
groups straddle byte boundaries. All operations are MSB-first (big-endian)
and accept any bit width, so a whole field element can be moved in one call.
"""

from __future__ import annotations


class BitPacker:
    """Packs values bit-by-bit into a byte buffer.

    Whole bytes are flushed to the output as soon as they are complete; at
    most seven bits are held back in the accumulator.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_uint(0b101, num_bits=3)
        >>> packer.write_uint(0, num_bits=5)
        >>> packer.to_bytes()
        b'\\xa0'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._buffer = bytearray()
        self._acc = 0
        self._acc_bits = 0

    def write_uint(self, value: int, num_bits: int) -> None:
        """Write an unsigned integer using the specified number of bits.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bits: Number of bits to use for encoding (>= 1)

        Raises:
            ValueError: If num_bits is invalid, or value is negative or doesn't fit
        """
        if num_bits < 1:
            raise ValueError(f"num_bits must be >= 1, got {num_bits}")
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if value >> num_bits:
            raise ValueError(f"Value {value} requires more than {num_bits} bits")

        acc = (self._acc << num_bits) | value
        acc_bits = self._acc_bits + num_bits

        whole, rest = divmod(acc_bits, 8)
        if whole:
            self._buffer += (acc >> rest).to_bytes(whole, "big")
            acc &= (1 << rest) - 1

        self._acc = acc
        self._acc_bits = rest

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes at the current bit position.

        Args:
            data: Bytes to write
        """
        if not data:
            return
        if self._acc_bits == 0:
            # Byte-aligned fast path
            self._buffer += data
            return
        self.write_uint(int.from_bytes(data, "big"), len(data) * 8)

    def bit_length(self) -> int:
        """Return the current number of bits written."""
        return len(self._buffer) * 8 + self._acc_bits

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).

        Returns:
            Packed bytes
        """
        if self._acc_bits == 0:
            return bytes(self._buffer)
        tail = self._acc << (8 - self._acc_bits)
        return bytes(self._buffer) + bytes([tail])


class BitUnpacker:
    """Unpacks values bit-by-bit from a byte buffer.

    The read position is an absolute bit offset into the buffer and can be
    moved with seek(), so callers can read N bits at any offset O.

    Example:
        >>> unpacker = BitUnpacker(b"\\xa5")
        >>> unpacker.read_uint(3)
        5
        >>> unpacker.read_uint(5)
        5
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a bit unpacker with the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = bytes(data)
        self._total_bits = len(self._data) * 8
        self._position = 0

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned integer of the specified bit width.

        Args:
            num_bits: Number of bits to read (>= 1)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        if num_bits < 1:
            raise ValueError(f"num_bits must be >= 1, got {num_bits}")

        start = self._position
        end = start + num_bits
        if end > self._total_bits:
            raise IndexError(
                f"Attempted to read past end of bit buffer: need {num_bits}, "
                f"have {self._total_bits - start}"
            )

        first_byte = start // 8
        last_byte = (end + 7) // 8
        window = int.from_bytes(self._data[first_byte:last_byte], "big")

        # Drop the bits after `end` that share the last byte
        trailing = last_byte * 8 - end
        value = (window >> trailing) & ((1 << num_bits) - 1)

        self._position = end
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes starting at the current bit position.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from buffer

        Raises:
            IndexError: If not enough bytes are available
        """
        if num_bytes == 0:
            return b""
        if self._position % 8 == 0:
            # Byte-aligned fast path
            start = self._position // 8
            if start + num_bytes > len(self._data):
                raise IndexError(
                    f"Attempted to read past end of bit buffer: need {num_bytes * 8}, "
                    f"have {self.bits_remaining()}"
                )
            self._position += num_bytes * 8
            return self._data[start : start + num_bytes]
        return self.read_uint(num_bytes * 8).to_bytes(num_bytes, "big")

    def seek(self, position: int) -> None:
        """Move the read cursor to an absolute bit offset.

        Args:
            position: Bit offset from the start of the buffer

        Raises:
            IndexError: If position is outside the buffer
        """
        if not 0 <= position <= self._total_bits:
            raise IndexError(f"Bit position {position} outside buffer of {self._total_bits} bits")
        self._position = position

    def bits_remaining(self) -> int:
        """Return the number of bits remaining in the buffer."""
        return self._total_bits - self._position

    def position(self) -> int:
        """Return the current bit position."""
        return self._position
