"""Main CLI entry point for duckdb-bitstring."""

from __future__ import annotations

import argparse
import binascii
import logging
import sys

from .. import __version__
from ..codec import decode, encode
from ..exceptions import BitstringError
from ..models.bitstring import Bitstring


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the duckdb-bitstring CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="duckdb-bitstring: DuckDB BIT value codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  duckdb-bitstring --decode 07ff         Decode a raw BIT buffer given as hex
  duckdb-bitstring --encode 10110        Show the parameter text for a literal
  duckdb-bitstring --version             Show version
        """,
    )

    command = parser.add_mutually_exclusive_group()

    command.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode a raw BIT value (hex-encoded bytes) and print its bits",
    )

    command.add_argument(
        "--encode",
        metavar="BITS",
        type=str,
        help="Validate a 0/1 literal and print the text bound as a parameter",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"duckdb-bitstring {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.decode is not None:
        try:
            raw = binascii.unhexlify(args.decode.replace(" ", ""))
        except (binascii.Error, ValueError) as e:
            print(f"Error: invalid hex input: {e}", file=sys.stderr)
            return 1

        try:
            print(decode(raw))
            return 0
        except BitstringError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.encode is not None:
        try:
            print(encode(Bitstring.from_str(args.encode)))
            return 0
        except (BitstringError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
