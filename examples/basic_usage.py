#!/usr/bin/env python3
"""Basic usage example for duckdb_bitstring.

This example demonstrates:
1. Decoding raw BIT buffers as returned by DuckDB
2. Building Bitstrings (owned and borrowed)
3. Encoding them as query parameters
4. Handling empty and malformed values
"""

from __future__ import annotations

from duckdb_bitstring import (
    BIT_PARAMETER,
    Bitstring,
    DecodeError,
    EmptyBitstringError,
    decode,
    encode,
    to_sql,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("duckdb_bitstring Basic Usage Example")
    print("=" * 60)
    print()

    # Header byte 3: the first three payload bits are padding
    print("1. Decoding a raw BIT value...")
    raw = bytes([3, 0b11110110, 0b10000011])
    bs = decode(raw)
    print(f"   Raw bytes: {raw.hex()}")
    print(f"   Bits: {bs} ({len(bs)} bits)")
    print()

    print("2. Building Bitstrings...")
    bits = [True, False, True, True, False]
    owned = Bitstring(bits)
    view = Bitstring.view(bits)
    print(f"   Owned:    {owned!r} (borrowed={owned.is_borrowed})")
    print(f"   Borrowed: {view!r} (borrowed={view.is_borrowed})")
    print()

    print("3. Encoding as a query parameter...")
    print(f"   SQL: insert into t1 values (?, {BIT_PARAMETER})")
    print(f"   Parameter: {encode(owned)!r}")
    print(f"   NULL parameter: {to_sql(None)!r}")
    print()

    print("4. Error handling...")
    try:
        encode(Bitstring())
    except EmptyBitstringError as e:
        print(f"   Empty: {e}")

    try:
        decode(bytes([9, 0xFF]))
    except DecodeError as e:
        print(f"   Malformed: {e}")

    print()
    print("=" * 60)


if __name__ == "__main__":
    main()
