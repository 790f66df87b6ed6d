"""Postcard encoder for table commitments.

This module provides encode_table_commitment(), the inverse of
decode_table_commitment(). It writes the same compact layout the commitment
producer uses, which makes it suitable for building fixtures.
"""

from __future__ import annotations

from typing import Callable

from ..exceptions import EncodeError
from ..models import (
    Bounds,
    BoundsFamily,
    BoundsKind,
    ColumnBounds,
    ColumnCommitmentMetadata,
    ColumnKind,
    ColumnType,
    Commitment,
    DoryCommitment,
    DynamicDoryCommitment,
    Ident,
    RistrettoCommitment,
    TableCommitment,
    TimeUnit,
)
from .postcard import USIZE_BITS, PostcardWriter

_BOUND_WRITERS: dict[BoundsFamily, Callable[[PostcardWriter, int], None]] = {
    BoundsFamily.UINT8: PostcardWriter.write_u8,
    BoundsFamily.TINY_INT: PostcardWriter.write_i8,
    BoundsFamily.SMALL_INT: lambda writer, value: writer.write_signed(value, 16),
    BoundsFamily.INT: lambda writer, value: writer.write_signed(value, 32),
    BoundsFamily.BIG_INT: lambda writer, value: writer.write_signed(value, 64),
    BoundsFamily.INT128: lambda writer, value: writer.write_signed(value, 128),
    BoundsFamily.TIMESTAMP_TZ: lambda writer, value: writer.write_signed(value, 64),
}


def encode_table_commitment(commitment: TableCommitment) -> bytes:
    """Encode a table commitment to postcard bytes.

    Args:
        commitment: Table commitment to encode

    Returns:
        Compact binary representation

    Raises:
        EncodeError: If a value doesn't fit its wire type

    Example:
        >>> data = encode_table_commitment(commitment)
        >>> decode_table_commitment(data, RistrettoCommitment) == commitment
        True
    """
    writer = PostcardWriter()

    try:
        columns = commitment.column_commitments
        writer.write_length(len(columns.commitments))
        for column_commitment in columns.commitments:
            _write_commitment(writer, column_commitment)

        writer.write_length(len(columns.column_metadata))
        for entry in columns.column_metadata:
            _write_ident(writer, entry.identifier)
            _write_metadata(writer, entry.metadata)

        writer.write_varint(commitment.range_start, USIZE_BITS)
        writer.write_varint(commitment.range_end, USIZE_BITS)
    except ValueError as e:
        raise EncodeError(f"Failed to encode table commitment: {e}") from e

    return writer.to_bytes()


def _write_commitment(writer: PostcardWriter, commitment: Commitment) -> None:
    if isinstance(commitment, RistrettoCommitment):
        writer.write_raw(commitment.data)
    elif isinstance(commitment, (DoryCommitment, DynamicDoryCommitment)):
        writer.write_bytes(commitment.data)
    else:
        raise EncodeError(f"Unsupported commitment type {type(commitment).__name__}")


def _write_ident(writer: PostcardWriter, identifier: Ident) -> None:
    writer.write_str(identifier.value)
    writer.write_option_tag(identifier.quote_style is not None)
    if identifier.quote_style is not None:
        writer.write_str(identifier.quote_style)


def _write_metadata(writer: PostcardWriter, metadata: ColumnCommitmentMetadata) -> None:
    _write_column_type(writer, metadata.column_type)
    _write_column_bounds(writer, metadata.bounds)


def _write_column_type(writer: PostcardWriter, column_type: ColumnType) -> None:
    writer.write_variant(list(ColumnKind).index(column_type.kind))

    if column_type.kind is ColumnKind.DECIMAL75:
        writer.write_u8(column_type.precision)
        writer.write_i8(column_type.scale)
    elif column_type.kind is ColumnKind.TIMESTAMP_TZ:
        writer.write_variant(list(TimeUnit).index(column_type.time_unit))
        writer.write_signed(column_type.timezone_offset, 32)


def _write_column_bounds(writer: PostcardWriter, column_bounds: ColumnBounds) -> None:
    writer.write_variant(list(BoundsFamily).index(column_bounds.family))
    if column_bounds.bounds is None:
        return

    _write_bounds(writer, column_bounds.bounds, _BOUND_WRITERS[column_bounds.family])


def _write_bounds(
    writer: PostcardWriter, bounds: Bounds, write_bound: Callable[[PostcardWriter, int], None]
) -> None:
    writer.write_variant(list(BoundsKind).index(bounds.kind))
    if bounds.kind is not BoundsKind.EMPTY:
        write_bound(writer, bounds.min)
        write_bound(writer, bounds.max)
