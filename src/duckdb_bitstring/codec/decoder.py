"""Decoder for raw DuckDB BIT values.

This module provides the decode() function that turns the packed byte
buffer DuckDB returns for a BIT column into a Bitstring.
"""

from __future__ import annotations

import logging

from ..constants import HEADER_SIZE, MAX_PADDING, MIN_RAW_LENGTH
from ..exceptions import RawDataBadPaddingError, RawDataTooShortError
from ..models.bitstring import Bitstring
from .bitpack import BitUnpacker

logger = logging.getLogger(__name__)


def decode(raw: bytes | bytearray | memoryview) -> Bitstring:
    """Decode a raw BIT value into a Bitstring.

    The buffer layout is:
    - [Padding count P (1 byte, 0-7)] [Payload (packed bits, MSB first)]

    The first P bits of the payload are padding and are dropped from the
    front, so the result holds ``8 * (len(raw) - 1) - P`` bits.

    Args:
        raw: Exact byte buffer returned by the store for a BIT cell

    Returns:
        Newly owned Bitstring

    Raises:
        RawDataTooShortError: If the buffer is shorter than 2 bytes
        RawDataBadPaddingError: If the header byte is larger than 7

    Example:
        >>> str(decode(bytes([7, 0b11111111])))
        '1'
        >>> str(decode(bytes([2, 0b11100101])))
        '100101'
    """
    if len(raw) < MIN_RAW_LENGTH:
        logger.debug("Rejecting raw BIT value of %d bytes", len(raw))
        raise RawDataTooShortError(len(raw))

    padding = raw[0]
    if padding > MAX_PADDING:
        logger.debug("Rejecting raw BIT value with padding header %d", padding)
        raise RawDataBadPaddingError(padding)

    unpacker = BitUnpacker(raw[HEADER_SIZE:])
    if padding:
        unpacker.skip(padding)

    return Bitstring(unpacker.read_remaining())
