#!/usr/bin/env python3
"""Basic usage example for blobpack.

This example demonstrates:
1. Inspecting the capacity of both strategies
2. Packing a payload into blobs
3. Unpacking the blobs back into the payload
4. Handling oversize input
"""

from __future__ import annotations

import os

from blobpack import DataLengthError, capacity_report, encoded_size, pack, unpack


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("blobpack Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Capacity per strategy...")
    for strategy in ("naive", "tight"):
        report = capacity_report(strategy)
        print(
            f"   {strategy}: {report['usable_bytes_per_blob']} usable bytes per blob, "
            f"{report['max_useful_bytes_per_tx']} per tx, overhead {report['overhead']:.2%}"
        )
    print()

    payload = os.urandom(100_000)
    print(f"2. Packing {len(payload)} bytes with tight packing...")
    blobs = pack(payload, strategy="tight")
    print(f"   {len(blobs)} blob(s), {encoded_size(len(payload), 'tight')} bytes on the wire")
    print()

    print("3. Unpacking...")
    restored = unpack(blobs, strategy="tight")
    print(f"   Round-trip {'successful' if restored == payload else 'FAILED'}")
    print()

    print("4. Same payload with naive packing...")
    try:
        pack(payload, strategy="naive")
    except DataLengthError as e:
        print(f"   Rejected: {e}")


if __name__ == "__main__":
    main()
