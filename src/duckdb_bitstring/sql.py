"""Adapters between DuckDB column values and Bitstring.

The read side receives whatever the driver returned for a BIT cell: raw
bytes for a present value, ``None`` for NULL. The write side produces the
scalar bound to a ``?::bit`` placeholder, keeping ``None`` as NULL.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

from .codec.decoder import decode
from .codec.encoder import encode
from .exceptions import InvalidTypeError
from .models.bitstring import Bitstring

logger = logging.getLogger(__name__)

#: Placeholder that makes DuckDB cast a bound text parameter to BIT.
BIT_PARAMETER = "?::bit"


def from_sql(value: Any) -> Optional[Bitstring]:
    """Convert a fetched BIT cell into a Bitstring.

    Args:
        value: Raw bytes for a present value, or None for NULL

    Returns:
        Decoded Bitstring, or None when the cell holds no value

    Raises:
        InvalidTypeError: If value is neither bytes-like nor None
        RawDataTooShortError: If the raw buffer is shorter than 2 bytes
        RawDataBadPaddingError: If the padding header is larger than 7

    Example:
        >>> from_sql(None) is None
        True
        >>> str(from_sql(b"\\x03\\xf5"))
        '10101'
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return decode(value)

    logger.debug("Unexpected %s value in BIT column", type(value).__name__)
    raise InvalidTypeError(type(value))


def to_sql(value: Union[Bitstring, Sequence[bool], None]) -> Optional[str]:
    """Convert a Bitstring into a query parameter for a BIT column.

    None is passed through so the store records NULL. An empty sequence is
    never turned into None; it raises like encode() does.

    Args:
        value: Bitstring, sequence of booleans, or None

    Returns:
        Bit-literal text to bind against ``?::bit``, or None

    Raises:
        EmptyBitstringError: If value is an empty sequence

    Examples:
        ```python
        con.execute(
            f"insert into t1 values (?, {BIT_PARAMETER})",
            [4, to_sql(maybe_bits)],
        )
        ```
    """
    if value is None:
        return None
    return encode(value)
