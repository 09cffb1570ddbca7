"""Bitstring codec for DuckDB BIT values.

This module provides decoding of the store's packed binary form and
encoding to the textual bit-literal form used for query parameters.
"""

from __future__ import annotations

from .bitpack import BitUnpacker
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "BitUnpacker",
]
