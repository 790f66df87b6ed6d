"""Pydantic models for decoded table commitments.

This module provides the typed values the codec decodes bytes into and
renders text from.
"""

from __future__ import annotations

from .base import CommitmentModel
from .column import (
    Bounds,
    BoundsFamily,
    BoundsKind,
    ColumnBounds,
    ColumnCommitmentMetadata,
    ColumnKind,
    ColumnType,
    Ident,
    TimeUnit,
)
from .commitment import (
    GT_ELEMENT_SIZE,
    RISTRETTO_POINT_SIZE,
    Commitment,
    DoryCommitment,
    DynamicDoryCommitment,
    RistrettoCommitment,
)
from .table import ColumnCommitments, ColumnMetadataEntry, TableCommitment

__all__ = [
    "CommitmentModel",
    # Column metadata
    "Bounds",
    "BoundsFamily",
    "BoundsKind",
    "ColumnBounds",
    "ColumnCommitmentMetadata",
    "ColumnKind",
    "ColumnType",
    "Ident",
    "TimeUnit",
    # Commitments
    "Commitment",
    "RistrettoCommitment",
    "DoryCommitment",
    "DynamicDoryCommitment",
    "RISTRETTO_POINT_SIZE",
    "GT_ELEMENT_SIZE",
    # Table
    "ColumnCommitments",
    "ColumnMetadataEntry",
    "TableCommitment",
]
