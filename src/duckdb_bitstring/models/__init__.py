"""Bit sequence models for duckdb_bitstring.

This module provides the Bitstring value type. The pydantic field helper
lives in ``duckdb_bitstring.models.fields``.
"""

from __future__ import annotations

from .bitstring import Bitstring

__all__ = [
    "Bitstring",
]
