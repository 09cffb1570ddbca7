"""Pydantic field support for Bitstring.

This module provides ``BitstringField``, an annotated type that lets
row models declare BIT columns and validate them from any of the forms
the store or the caller may hand over.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic_core import core_schema

from ..codec.decoder import decode
from ..exceptions import DecodeError
from .bitstring import Bitstring


def validate_bitstring(value: Any) -> Bitstring:
    """Coerce a field value into a Bitstring.

    Accepted inputs:
    - Bitstring (returned as is)
    - str of ``'0'``/``'1'`` characters
    - raw store bytes (decoded)
    - list or tuple of bools or 0/1 integers

    Args:
        value: Incoming field value

    Returns:
        Bitstring

    Raises:
        ValueError: If the value cannot be interpreted as a bit sequence
    """
    if isinstance(value, Bitstring):
        return value
    if isinstance(value, str):
        return Bitstring.from_str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return decode(value)
        except DecodeError as e:
            raise ValueError(str(e)) from e
    if isinstance(value, (list, tuple)):
        for index, bit in enumerate(value):
            if not isinstance(bit, int) or bit not in (0, 1):
                raise ValueError(f"Invalid bit {bit!r} at position {index}")
        return Bitstring(value)

    raise ValueError(f"Cannot interpret {type(value).__name__} as a bit string")


class _BitstringAnnotation:
    """Pydantic core schema hook for Bitstring fields."""

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_bitstring,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )


BitstringField = Annotated[Bitstring, _BitstringAnnotation]
"""Annotated Bitstring type for use in pydantic models.

Example:
    >>> from pydantic import BaseModel
    >>> class Row(BaseModel):
    ...     id: int
    ...     d: BitstringField
    >>> str(Row(id=1, d="10110").d)
    '10110'
"""
