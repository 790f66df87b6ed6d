"""Postcard decoder for table commitments.

This module provides decode_table_commitment(), which parses the compact
binary form written by the commitment producer into a TableCommitment.
Decoding is all-or-nothing: either a complete value is parsed from the front
of the buffer, or DeserializationError is raised. Bytes after a complete
value are ignored, as postcard's from_bytes does.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..exceptions import DeserializationError
from ..models import (
    Bounds,
    BoundsFamily,
    BoundsKind,
    ColumnBounds,
    ColumnCommitmentMetadata,
    ColumnCommitments,
    ColumnKind,
    ColumnMetadataEntry,
    ColumnType,
    Commitment,
    DoryCommitment,
    DynamicDoryCommitment,
    Ident,
    RistrettoCommitment,
    TableCommitment,
    TimeUnit,
)
from .points import is_canonical_gt_element, is_valid_ristretto_point
from .postcard import USIZE_BITS, PostcardReader

logger = logging.getLogger(__name__)

CommitmentReader = Callable[[PostcardReader], Commitment]

_BOUND_READERS: dict[BoundsFamily, Callable[[PostcardReader], int]] = {
    BoundsFamily.UINT8: PostcardReader.read_u8,
    BoundsFamily.TINY_INT: PostcardReader.read_i8,
    BoundsFamily.SMALL_INT: lambda reader: reader.read_signed(16),
    BoundsFamily.INT: lambda reader: reader.read_signed(32),
    BoundsFamily.BIG_INT: lambda reader: reader.read_signed(64),
    BoundsFamily.INT128: lambda reader: reader.read_signed(128),
    BoundsFamily.TIMESTAMP_TZ: lambda reader: reader.read_signed(64),
}


def decode_table_commitment(data: bytes, commitment_type: type[Commitment]) -> TableCommitment:
    """Decode postcard bytes into a table commitment.

    Args:
        data: Serialized table commitment
        commitment_type: Commitment model of the active scheme

    Returns:
        Decoded table commitment

    Raises:
        DeserializationError: If data is truncated, holds a non-canonical
            commitment, or doesn't match the expected structure

    Example:
        >>> commitment = decode_table_commitment(data, RistrettoCommitment)
        >>> commitment.num_columns
        2
    """
    read_commitment = _COMMITMENT_READERS[commitment_type]
    reader = PostcardReader(data)

    try:
        commitment = _read_table_commitment(reader, read_commitment)
    except IndexError as e:
        raise DeserializationError(f"Truncated data at byte {reader.position()}: {e}") from e
    except ValueError as e:
        raise DeserializationError(f"Invalid data at byte {reader.position()}: {e}") from e

    if reader.bytes_remaining():
        logger.debug("Ignoring %d trailing bytes", reader.bytes_remaining())

    logger.debug(
        "Decoded %s table commitment: %d columns, rows %d..%d",
        commitment_type.type_name(),
        commitment.num_columns,
        commitment.range_start,
        commitment.range_end,
    )
    return commitment


def _read_table_commitment(
    reader: PostcardReader, read_commitment: CommitmentReader
) -> TableCommitment:
    column_commitments = _read_column_commitments(reader, read_commitment)
    range_start = reader.read_varint(USIZE_BITS)
    range_end = reader.read_varint(USIZE_BITS)
    return TableCommitment(
        column_commitments=column_commitments,
        range_start=range_start,
        range_end=range_end,
    )


def _read_column_commitments(
    reader: PostcardReader, read_commitment: CommitmentReader
) -> ColumnCommitments:
    commitments = [read_commitment(reader) for _ in range(reader.read_length())]

    # Ordered map: a repeated identifier replaces the value but keeps its position
    metadata: dict[Ident, ColumnCommitmentMetadata] = {}
    for _ in range(reader.read_length()):
        identifier = _read_ident(reader)
        metadata[identifier] = _read_metadata(reader)

    return ColumnCommitments(
        commitments=commitments,
        column_metadata=[
            ColumnMetadataEntry(identifier=identifier, metadata=value)
            for identifier, value in metadata.items()
        ],
    )


def _read_ident(reader: PostcardReader) -> Ident:
    value = reader.read_str()
    quote_style = reader.read_char() if reader.read_option_tag() else None
    return Ident(value=value, quote_style=quote_style)


def _read_metadata(reader: PostcardReader) -> ColumnCommitmentMetadata:
    column_type = _read_column_type(reader)
    bounds = _read_column_bounds(reader)
    return ColumnCommitmentMetadata(column_type=column_type, bounds=bounds)


def _read_column_type(reader: PostcardReader) -> ColumnType:
    kinds = list(ColumnKind)
    kind = kinds[reader.read_variant(len(kinds))]

    if kind is ColumnKind.DECIMAL75:
        precision = reader.read_u8()
        scale = reader.read_i8()
        return ColumnType(kind=kind, precision=precision, scale=scale)

    if kind is ColumnKind.TIMESTAMP_TZ:
        units = list(TimeUnit)
        time_unit = units[reader.read_variant(len(units))]
        offset = reader.read_signed(32)
        return ColumnType(kind=kind, time_unit=time_unit, timezone_offset=offset)

    return ColumnType(kind=kind)


def _read_column_bounds(reader: PostcardReader) -> ColumnBounds:
    families = list(BoundsFamily)
    family = families[reader.read_variant(len(families))]

    if family is BoundsFamily.NO_ORDER:
        return ColumnBounds(family=family)

    read_bound = _BOUND_READERS[family]
    kinds = list(BoundsKind)
    kind = kinds[reader.read_variant(len(kinds))]

    if kind is BoundsKind.EMPTY:
        return ColumnBounds(family=family, bounds=Bounds(kind=kind))

    lower = read_bound(reader)
    upper = read_bound(reader)
    return ColumnBounds(family=family, bounds=Bounds(kind=kind, min=lower, max=upper))


def _read_ristretto(reader: PostcardReader) -> RistrettoCommitment:
    data = reader.read_raw(RistrettoCommitment.payload_size)
    if not is_valid_ristretto_point(data):
        raise ValueError("Invalid compressed Ristretto point")
    return RistrettoCommitment(data=data)


def _read_dory(reader: PostcardReader) -> DoryCommitment:
    return DoryCommitment(data=_read_gt_element(reader, DoryCommitment.payload_size))


def _read_dynamic_dory(reader: PostcardReader) -> DynamicDoryCommitment:
    return DynamicDoryCommitment(data=_read_gt_element(reader, DynamicDoryCommitment.payload_size))


def _read_gt_element(reader: PostcardReader, size: int) -> bytes:
    """Read a length-prefixed target-group element of exactly ``size`` bytes."""
    data = reader.read_bytes()
    if len(data) != size:
        raise ValueError(f"Target-group element must be {size} bytes, got {len(data)}")
    if not is_canonical_gt_element(data):
        raise ValueError("Target-group element has a coefficient outside the base field")
    return data


_COMMITMENT_READERS: dict[type, CommitmentReader] = {
    RistrettoCommitment: _read_ristretto,
    DoryCommitment: _read_dory,
    DynamicDoryCommitment: _read_dynamic_dory,
}
