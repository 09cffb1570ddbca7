"""duckdb_bitstring: DuckDB BIT type codec

Converts between Python bit sequences and DuckDB's BIT column type.
Values read from the store arrive as a packed byte buffer (one padding
header byte followed by MSB-first payload bytes) and are decoded into a
Bitstring. Values sent to the store are rendered as ``0``/``1`` text and
cast by DuckDB itself with ``?::bit``.

Quick Start:
    >>> from duckdb_bitstring import Bitstring, decode, encode
    >>>
    >>> bs = decode(bytes([3, 0b11110101]))
    >>> str(bs)
    '10101'
    >>> encode(Bitstring.from_str("10110"))
    '10110'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import decode, encode
from .exceptions import (
    BitstringError,
    DecodeError,
    EmptyBitstringError,
    EncodeError,
    InvalidTypeError,
    RawDataBadPaddingError,
    RawDataTooShortError,
)
from .models import Bitstring
from .models.fields import BitstringField
from .sql import BIT_PARAMETER, from_sql, to_sql

__all__ = [
    # Core API
    "Bitstring",
    "encode",
    "decode",
    # SQL adapters
    "from_sql",
    "to_sql",
    "BIT_PARAMETER",
    # Pydantic
    "BitstringField",
    # Exceptions
    "BitstringError",
    "EncodeError",
    "DecodeError",
    "EmptyBitstringError",
    "RawDataTooShortError",
    "RawDataBadPaddingError",
    "InvalidTypeError",
    # Version
    "__version__",
]
