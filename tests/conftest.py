"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from commit_utility import Scheme, encode_table_commitment
from commit_utility.models import (
    GT_ELEMENT_SIZE,
    RISTRETTO_POINT_SIZE,
    Bounds,
    BoundsFamily,
    BoundsKind,
    ColumnBounds,
    ColumnCommitmentMetadata,
    ColumnCommitments,
    ColumnKind,
    ColumnMetadataEntry,
    ColumnType,
    DoryCommitment,
    DynamicDoryCommitment,
    Ident,
    RistrettoCommitment,
    TableCommitment,
    TimeUnit,
)


# Encodings of 0, B, 2B and 3B for the ristretto255 generator B
RISTRETTO_POINTS = [
    bytes(RISTRETTO_POINT_SIZE),
    bytes.fromhex("e2f2ae0a6abc4e71a884a961c500515f58e30b6aa582dd8db6a65945e08d2d76"),
    bytes.fromhex("6a493210f7499cd17fecb510ae0cea23a110e8d5b901f8acadd3095c73a3b919"),
    bytes.fromhex("94741f5d5d52755ece4f23f044ee27d5d1ea1e2bd196b462166b16152a9d0259"),
]

FQ_SIZE = 48


def make_gt_payload(seed: int) -> bytes:
    """576 recognizable bytes whose twelve Fq coefficients are all reduced."""
    coefficient = bytes((seed * 31 + i) % 256 for i in range(FQ_SIZE - 1)) + b"\x00"
    return coefficient * (GT_ELEMENT_SIZE // FQ_SIZE)


def make_metadata_entries() -> list[ColumnMetadataEntry]:
    """Metadata for a four-column table covering every parameterized type."""
    return [
        ColumnMetadataEntry(
            identifier=Ident(value="id"),
            metadata=ColumnCommitmentMetadata(
                column_type=ColumnType(kind=ColumnKind.BIG_INT),
                bounds=ColumnBounds(
                    family=BoundsFamily.BIG_INT,
                    bounds=Bounds(kind=BoundsKind.SHARP, min=1, max=4),
                ),
            ),
        ),
        ColumnMetadataEntry(
            identifier=Ident(value="name"),
            metadata=ColumnCommitmentMetadata(
                column_type=ColumnType(kind=ColumnKind.VAR_CHAR),
                bounds=ColumnBounds(family=BoundsFamily.NO_ORDER),
            ),
        ),
        ColumnMetadataEntry(
            identifier=Ident(value="Price", quote_style='"'),
            metadata=ColumnCommitmentMetadata(
                column_type=ColumnType(kind=ColumnKind.DECIMAL75, precision=10, scale=-2),
                bounds=ColumnBounds(family=BoundsFamily.NO_ORDER),
            ),
        ),
        ColumnMetadataEntry(
            identifier=Ident(value="created_at"),
            metadata=ColumnCommitmentMetadata(
                column_type=ColumnType(
                    kind=ColumnKind.TIMESTAMP_TZ,
                    time_unit=TimeUnit.MILLISECOND,
                    timezone_offset=-3600,
                ),
                bounds=ColumnBounds(
                    family=BoundsFamily.TIMESTAMP_TZ,
                    bounds=Bounds(kind=BoundsKind.BOUNDED, min=-5, max=1_700_000_000_000),
                ),
            ),
        ),
    ]


def make_commitment(scheme: Scheme, index: int):
    """Deterministic, recognizable commitment payload for column ``index``."""
    if scheme is Scheme.INNER_PRODUCT_ARGUMENT:
        return RistrettoCommitment(data=RISTRETTO_POINTS[index])
    payload = make_gt_payload(index)
    if scheme is Scheme.DORY:
        return DoryCommitment(data=payload)
    return DynamicDoryCommitment(data=payload)


def make_table_commitment(scheme: Scheme) -> TableCommitment:
    """Four-column table commitment over rows 0..4 for the given scheme."""
    entries = make_metadata_entries()
    return TableCommitment(
        column_commitments=ColumnCommitments(
            commitments=[make_commitment(scheme, i) for i in range(len(entries))],
            column_metadata=entries,
        ),
        range_start=0,
        range_end=4,
    )


@pytest.fixture(params=list(Scheme), ids=lambda scheme: scheme.value)
def scheme(request: pytest.FixtureRequest) -> Scheme:
    """Every supported scheme."""
    return request.param


@pytest.fixture
def table_commitment(scheme: Scheme) -> TableCommitment:
    """Sample table commitment for the active scheme."""
    return make_table_commitment(scheme)


@pytest.fixture
def encoded_commitment(table_commitment: TableCommitment) -> bytes:
    """Postcard bytes of the sample table commitment."""
    return encode_table_commitment(table_commitment)


@pytest.fixture
def ipa_bytes() -> bytes:
    """Hand-assembled IPA table commitment: one BigInt column "a", rows 0..4."""
    return (
        b"\x01"  # one commitment
        + b"\x00" * RISTRETTO_POINT_SIZE  # compressed point
        + b"\x01"  # one metadata entry
        + b"\x01a"  # Ident.value = "a"
        + b"\x00"  # Ident.quote_style = None
        + b"\x05"  # ColumnType::BigInt
        + b"\x05"  # ColumnBounds::BigInt
        + b"\x02"  # Bounds::Sharp
        + b"\x02"  # min = 1 (zigzag)
        + b"\x08"  # max = 4 (zigzag)
        + b"\x00"  # range.start
        + b"\x04"  # range.end
    )
