"""Wire-format constants for DuckDB BIT values."""

from __future__ import annotations

#: Size of the padding header that precedes the packed payload.
HEADER_SIZE = 1

#: Smallest valid raw buffer: header byte plus one payload byte.
MIN_RAW_LENGTH = HEADER_SIZE + 1

#: At most 7 of the 8 bits in the first payload byte can be padding.
MAX_PADDING = 7

BITS_PER_BYTE = 8

#: Characters used by the textual bit-literal form.
ZERO_CHAR = "0"
ONE_CHAR = "1"
