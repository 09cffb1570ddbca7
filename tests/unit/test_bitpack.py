"""Unit tests for bit unpacking."""

from __future__ import annotations

import pytest

from duckdb_bitstring.codec.bitpack import BitUnpacker


class TestBitUnpacker:
    """Test BitUnpacker functionality."""

    def test_msb_first(self) -> None:
        """Test bits come out MSB first."""
        unpacker = BitUnpacker(b"\xa0")  # 10100000

        assert unpacker.read_remaining() == (True, False, True, False, False, False, False, False)

    def test_byte_order(self) -> None:
        """Test bytes are unpacked in buffer order."""
        unpacker = BitUnpacker(b"\x01\x80")

        assert unpacker.read_remaining() == (False,) * 7 + (True, True) + (False,) * 7

    def test_skip(self) -> None:
        """Test skipping leading bits."""
        unpacker = BitUnpacker(b"\xf0")  # 11110000
        unpacker.skip(3)

        assert unpacker.bits_remaining() == 5
        assert unpacker.read_remaining() == (True, False, False, False, False)

    def test_skip_zero(self) -> None:
        """Test skipping nothing leaves the cursor alone."""
        unpacker = BitUnpacker(b"\xff")
        unpacker.skip(0)

        assert unpacker.bits_remaining() == 8

    def test_skip_errors(self) -> None:
        """Test skip bounds checking."""
        unpacker = BitUnpacker(b"\xff")

        with pytest.raises(ValueError, match="non-negative"):
            unpacker.skip(-1)

        with pytest.raises(IndexError, match="Not enough bits"):
            unpacker.skip(9)

    def test_read_remaining_exhausts(self) -> None:
        """Test nothing is left after reading the remainder."""
        unpacker = BitUnpacker(b"\xff")
        unpacker.read_remaining()

        assert unpacker.bits_remaining() == 0
        assert unpacker.read_remaining() == ()
        with pytest.raises(IndexError, match="Not enough bits"):
            unpacker.skip(1)

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test bytes-like inputs unpack identically."""
        expected = BitUnpacker(b"\x5a").read_remaining()

        assert BitUnpacker(bytearray(b"\x5a")).read_remaining() == expected
        assert BitUnpacker(memoryview(b"\x5a")).read_remaining() == expected

    def test_empty(self) -> None:
        """Test empty buffer."""
        unpacker = BitUnpacker(b"")

        assert unpacker.bits_remaining() == 0
        assert unpacker.read_remaining() == ()
