"""Table-level commitment: per-column commitments plus row-range metadata."""

from __future__ import annotations

from pydantic import Field, model_validator

from .base import CommitmentModel
from .column import ColumnCommitmentMetadata, Ident
from .commitment import Commitment

USIZE_MAX = 2**64 - 1


class ColumnMetadataEntry(CommitmentModel):
    """One identifier -> metadata pair of the ordered column metadata map."""

    identifier: Ident
    metadata: ColumnCommitmentMetadata


class ColumnCommitments(CommitmentModel):
    """Commitments of every column in a table, with their metadata.

    ``column_metadata`` keeps the producer's insertion order.
    """

    commitments: list[Commitment]
    column_metadata: list[ColumnMetadataEntry]

    @model_validator(mode="after")
    def _check_single_scheme(self) -> ColumnCommitments:
        kinds = {type(commitment) for commitment in self.commitments}
        if len(kinds) > 1:
            names = sorted(kind.__name__ for kind in kinds)
            raise ValueError(f"Commitments mix schemes: {names}")
        return self

    def identifiers(self) -> list[str]:
        """Return the column names in metadata order."""
        return [entry.identifier.value for entry in self.column_metadata]


class TableCommitment(CommitmentModel):
    """Commitment to an entire table.

    The table covers rows ``range_start`` (inclusive) to ``range_end``
    (exclusive).

    Example:
        >>> from commit_utility.codec import decode_table_commitment
        >>> commitment = decode_table_commitment(data, DoryCommitment)
        >>> commitment.num_rows, commitment.num_columns
        (4, 2)
    """

    column_commitments: ColumnCommitments
    range_start: int = Field(ge=0, le=USIZE_MAX)
    range_end: int = Field(ge=0, le=USIZE_MAX)

    @property
    def num_rows(self) -> int:
        """Number of rows the range covers (0 for an inverted range)."""
        return max(self.range_end - self.range_start, 0)

    @property
    def num_columns(self) -> int:
        """Number of committed columns."""
        return len(self.column_commitments.commitments)
