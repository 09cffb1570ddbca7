"""Bit-level unpacking utilities.

This module provides low-level bit extraction for the packed payload of
DuckDB BIT values. Bits are read most-significant first within each byte,
bytes in buffer order.
"""

from __future__ import annotations

from ..constants import BITS_PER_BYTE


class BitUnpacker:
    """Unpacks bits from a byte buffer.

    The whole buffer is expanded up front; reads then move a cursor over
    the expanded bits.

    Example:
        >>> unpacker = BitUnpacker(b"\\xa0")
        >>> unpacker.skip(3)
        >>> unpacker.read_remaining()
        (False, False, False, False, False)
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a bit unpacker with the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._bits: list[bool] = []
        for byte in data:
            for i in range(BITS_PER_BYTE - 1, -1, -1):
                self._bits.append(bool((byte >> i) & 1))
        self._position = 0

    def skip(self, num_bits: int) -> None:
        """Advance the cursor without returning the skipped bits.

        Args:
            num_bits: Number of bits to discard

        Raises:
            ValueError: If num_bits is negative
            IndexError: If not enough bits are available
        """
        if num_bits < 0:
            raise ValueError(f"num_bits must be non-negative, got {num_bits}")
        if self._position + num_bits > len(self._bits):
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {self.bits_remaining()}"
            )
        self._position += num_bits

    def read_remaining(self) -> tuple[bool, ...]:
        """Read every bit from the cursor to the end of the buffer.

        Returns:
            The unread bits, in order
        """
        remaining = tuple(self._bits[self._position :])
        self._position = len(self._bits)
        return remaining

    def bits_remaining(self) -> int:
        """Return the number of bits remaining in the buffer."""
        return len(self._bits) - self._position
