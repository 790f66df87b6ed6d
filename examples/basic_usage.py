#!/usr/bin/env python3
"""Basic usage example for commit_utility.

This example demonstrates:
1. Building a table commitment with the pydantic models
2. Encoding it to the producer's compact binary format
3. Resolving a scheme by name and rendering the bytes
4. Writing a fixture file for the command-line tool
"""

from __future__ import annotations

import sys
from pathlib import Path

from commit_utility import (
    ColumnCommitments,
    RistrettoCommitment,
    TableCommitment,
    decode_and_render,
    encode_table_commitment,
    resolve_scheme,
)
from commit_utility.models import (
    Bounds,
    BoundsFamily,
    BoundsKind,
    ColumnBounds,
    ColumnCommitmentMetadata,
    ColumnKind,
    ColumnMetadataEntry,
    ColumnType,
    Ident,
)


# Ristretto255 generator B and 2B
GENERATOR = bytes.fromhex("e2f2ae0a6abc4e71a884a961c500515f58e30b6aa582dd8db6a65945e08d2d76")
GENERATOR_DOUBLED = bytes.fromhex(
    "6a493210f7499cd17fecb510ae0cea23a110e8d5b901f8acadd3095c73a3b919"
)


def build_commitment() -> TableCommitment:
    """Two-column table over rows 0..3 with IPA commitments."""
    return TableCommitment(
        column_commitments=ColumnCommitments(
            commitments=[
                RistrettoCommitment(data=GENERATOR),
                RistrettoCommitment(data=GENERATOR_DOUBLED),
            ],
            column_metadata=[
                ColumnMetadataEntry(
                    identifier=Ident(value="account_id"),
                    metadata=ColumnCommitmentMetadata(
                        column_type=ColumnType(kind=ColumnKind.BIG_INT),
                        bounds=ColumnBounds(
                            family=BoundsFamily.BIG_INT,
                            bounds=Bounds(kind=BoundsKind.SHARP, min=100, max=102),
                        ),
                    ),
                ),
                ColumnMetadataEntry(
                    identifier=Ident(value="owner"),
                    metadata=ColumnCommitmentMetadata(
                        column_type=ColumnType(kind=ColumnKind.VAR_CHAR),
                        bounds=ColumnBounds(family=BoundsFamily.NO_ORDER),
                    ),
                ),
            ],
        ),
        range_start=0,
        range_end=3,
    )


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("commit_utility Basic Usage Example")
    print("=" * 60)
    print()

    commitment = build_commitment()
    print(f"1. Built a commitment: {commitment.num_columns} columns, {commitment.num_rows} rows")

    data = encode_table_commitment(commitment)
    print(f"2. Encoded to {len(data)} bytes: {data[:16].hex()}...")
    print()

    scheme = resolve_scheme("IPA")
    print(f"3. Rendering under {scheme.value}:")
    print(decode_and_render(scheme, data))
    print()

    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
        path.write_bytes(data)
        print(f"4. Wrote fixture to {path}")
        print(f"   Try: commit-utility --scheme ipa --input {path}")


if __name__ == "__main__":
    main()
