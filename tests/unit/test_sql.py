"""Unit tests for the SQL value adapters."""

from __future__ import annotations

import pytest

from duckdb_bitstring import (
    BIT_PARAMETER,
    Bitstring,
    EmptyBitstringError,
    InvalidTypeError,
    RawDataBadPaddingError,
    RawDataTooShortError,
    from_sql,
    to_sql,
)


class TestFromSql:
    """Test converting fetched cells."""

    def test_none(self) -> None:
        """Test NULL cells stay None."""
        assert from_sql(None) is None

    def test_bytes(self, sample_raw: bytes) -> None:
        """Test binary cells are decoded."""
        assert str(from_sql(sample_raw)) == "011001011110010100000101"

    def test_memoryview(self) -> None:
        """Test memoryview cells are decoded."""
        assert str(from_sql(memoryview(b"\x03\xf5"))) == "10101"

    @pytest.mark.parametrize("value", ["10110", 5, 1.5, [True]])
    def test_invalid_type(self, value: object) -> None:
        """Test non-binary cells are rejected."""
        with pytest.raises(InvalidTypeError) as exc_info:
            from_sql(value)

        assert exc_info.value.value_type is type(value)

    def test_decode_errors_propagate(self) -> None:
        """Test malformed buffers raise the decoder's errors."""
        with pytest.raises(RawDataTooShortError):
            from_sql(b"\x00")

        with pytest.raises(RawDataBadPaddingError):
            from_sql(b"\x08\x00")


class TestToSql:
    """Test producing query parameters."""

    def test_none(self) -> None:
        """Test None becomes NULL."""
        assert to_sql(None) is None

    def test_bitstring(self) -> None:
        """Test owned Bitstring parameter."""
        assert to_sql(Bitstring.from_str("10110")) == "10110"

    def test_borrowed(self, sample_bits: list[bool]) -> None:
        """Test borrowed and plain sequence parameters."""
        assert to_sql(Bitstring.view(sample_bits)) == "11001000001110101011"
        assert to_sql(sample_bits) == "11001000001110101011"

    def test_empty_not_coerced(self) -> None:
        """Test empty values raise instead of becoming NULL."""
        with pytest.raises(EmptyBitstringError):
            to_sql(Bitstring())

    def test_placeholder(self) -> None:
        """Test the placeholder casts to BIT."""
        assert BIT_PARAMETER == "?::bit"
