"""Encoder producing DuckDB bit-literal parameters.

This module provides the encode() function that renders a bit sequence as
the ``0``/``1`` text DuckDB casts to BIT with ``?::bit``. Packing into the
store's binary layout is left to DuckDB's literal parser.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

from ..exceptions import EmptyBitstringError
from ..models.bitstring import Bitstring

logger = logging.getLogger(__name__)

BitsLike = Union[Bitstring, Sequence[bool]]


def encode(bits: BitsLike) -> str:
    """Encode a bit sequence as a DuckDB bit literal.

    Args:
        bits: Bitstring, or any sequence of booleans (borrowed, not copied)

    Returns:
        One ``'1'`` or ``'0'`` character per bit, in sequence order

    Raises:
        EmptyBitstringError: If the sequence has no bits

    Examples:
        ```python
        from duckdb_bitstring import Bitstring, encode

        con.execute("insert into t1 values (?, ?::bit)", [4, encode(bs)])
        ```
    """
    bitstring = bits if isinstance(bits, Bitstring) else Bitstring.view(bits)

    if not bitstring:
        logger.debug("Refusing to encode an empty bit string")
        raise EmptyBitstringError()

    return bitstring.to_str()
