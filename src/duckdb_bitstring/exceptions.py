"""Exception hierarchy for duckdb_bitstring.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BitstringError for easy catching of any
bitstring-specific error.
"""

from __future__ import annotations


class BitstringError(Exception):
    """Base exception for all duckdb_bitstring errors."""

    pass


class EncodeError(BitstringError):
    """Raised when a bit sequence cannot be turned into a query parameter."""

    pass


class EmptyBitstringError(EncodeError):
    """Raised when encoding a zero-length bit sequence.

    DuckDB cannot store an empty BIT value. Model absence with a nullable
    column and ``None`` instead of an empty sequence.
    """

    def __init__(self) -> None:
        super().__init__(
            "DuckDB does not support empty bit strings, "
            "consider using a nullable column and None"
        )


class DecodeError(BitstringError):
    """Raised when a raw BIT value returned by the store cannot be decoded.

    Examples:
        - Buffer shorter than header byte plus one payload byte
        - Padding header outside 0-7
        - Value source handed over something that is not binary data
    """

    pass


class RawDataTooShortError(DecodeError):
    """Raised when the raw buffer is shorter than 2 bytes.

    Attributes:
        length: Length of the offending buffer in bytes
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"raw data too short (should be at least 2 bytes, was {length} bytes long)"
        )


class RawDataBadPaddingError(DecodeError):
    """Raised when the padding header byte is larger than 7.

    Attributes:
        padding: The header byte as read from the buffer
    """

    def __init__(self, padding: int) -> None:
        self.padding = padding
        super().__init__(f"raw data padding byte should be 0-7, was {padding}")


class InvalidTypeError(DecodeError):
    """Raised when a column value is neither binary data nor NULL."""

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(
            f"expected bytes-like BIT value or None, got {value_type.__name__}"
        )
