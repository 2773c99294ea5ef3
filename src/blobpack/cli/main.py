"""Main CLI entry point for blobpack."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import PackingError
from ..packer import get_packer
from ..utils.sizing import capacity_report


def print_info(strategy: str) -> None:
    """Print the capacity figures of a strategy."""
    print(f"{'=' * 19} {strategy} packing {'=' * 19}")
    for key, value in capacity_report(strategy).items():
        if isinstance(value, float):
            print(f"  {key:<34} {value:.2%}")
        else:
            print(f"  {key:<34} {value}")


def pack_file(source: Path, dest: Path, strategy: str) -> int:
    """Pack a file and write its blobs, concatenated, to dest.

    Returns:
        Number of blobs written
    """
    blobs = get_packer(strategy).pack(source.read_bytes())
    dest.write_bytes(b"".join(blobs))
    return len(blobs)


def unpack_file(source: Path, dest: Path, strategy: str) -> int:
    """Split a file of concatenated blobs, unpack it and write the payload to dest.

    Returns:
        Number of payload bytes written
    """
    packer = get_packer(strategy)
    raw = source.read_bytes()
    size = packer.blob_size_bytes
    # A short trailing blob is kept so unpack() reports the truncation
    blobs = [raw[i : i + size] for i in range(0, len(raw), size)]
    payload = packer.unpack(blobs)
    dest.write_bytes(payload)
    return len(payload)


def main() -> int:
    """Main entry point for the blobpack CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="blobpack: pack bytes into EIP-4844 style blobs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  blobpack --info --strategy tight       Show tight packing capacity
  blobpack pack batch.bin blobs.bin      Pack a file into blobs
  blobpack unpack blobs.bin batch.bin    Recover the original file
        """,
    )

    parser.add_argument(
        "--strategy",
        choices=["naive", "tight"],
        default="naive",
        help="Packing strategy (default: naive)",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Show capacity constants of the selected strategy",
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
        version=f"blobpack {__version__}",
    )

    sub = parser.add_subparsers(dest="command")
    for name, help_text in (
        ("pack", "Pack INPUT into blobs written to OUTPUT"),
        ("unpack", "Unpack blobs in INPUT and write the payload to OUTPUT"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("input", metavar="INPUT", type=Path)
        cmd.add_argument("output", metavar="OUTPUT", type=Path)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.info:
        print_info(args.strategy)
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    if not args.input.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    try:
        if args.command == "pack":
            count = pack_file(args.input, args.output, args.strategy)
            print(f"Wrote {count} {args.strategy} blob(s) to {args.output}")
        else:
            count = unpack_file(args.input, args.output, args.strategy)
            print(f"Wrote {count} bytes to {args.output}")
    except (PackingError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
