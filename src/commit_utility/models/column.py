"""Per-column metadata carried alongside each column commitment.

Enum members are declared in wire order: the position of a member in its
enum is the variant index the producer writes for it.
"""

from __future__ import annotations

import enum

from pydantic import Field, model_validator

from .base import CommitmentModel

# Decimal75 precision limits
MIN_PRECISION = 1
MAX_PRECISION = 75


class ColumnKind(enum.Enum):
    """Column data type, without parameters."""

    BOOLEAN = "Boolean"
    UINT8 = "Uint8"
    TINY_INT = "TinyInt"
    SMALL_INT = "SmallInt"
    INT = "Int"
    BIG_INT = "BigInt"
    INT128 = "Int128"
    DECIMAL75 = "Decimal75"
    VAR_CHAR = "VarChar"
    TIMESTAMP_TZ = "TimestampTZ"
    SCALAR = "Scalar"
    VAR_BINARY = "VarBinary"


class TimeUnit(enum.Enum):
    """Timestamp resolution."""

    SECOND = "Second"
    MILLISECOND = "Millisecond"
    MICROSECOND = "Microsecond"
    NANOSECOND = "Nanosecond"


class BoundsKind(enum.Enum):
    """How tight a column's recorded min/max are."""

    EMPTY = "Empty"
    BOUNDED = "Bounded"
    SHARP = "Sharp"


class BoundsFamily(enum.Enum):
    """Integer family a column's bounds are recorded in."""

    NO_ORDER = "NoOrder"
    UINT8 = "Uint8"
    TINY_INT = "TinyInt"
    SMALL_INT = "SmallInt"
    INT = "Int"
    BIG_INT = "BigInt"
    INT128 = "Int128"
    TIMESTAMP_TZ = "TimestampTZ"


class Ident(CommitmentModel):
    """SQL identifier naming a column."""

    value: str
    quote_style: str | None = Field(default=None, min_length=1, max_length=1)


class ColumnType(CommitmentModel):
    """Column data type with its parameters.

    ``precision`` and ``scale`` are set only for DECIMAL75;
    ``time_unit`` and ``timezone_offset`` only for TIMESTAMP_TZ.
    """

    kind: ColumnKind
    precision: int | None = Field(default=None, ge=MIN_PRECISION, le=MAX_PRECISION)
    scale: int | None = Field(default=None, ge=-128, le=127)
    time_unit: TimeUnit | None = None
    timezone_offset: int | None = Field(default=None, ge=-(2**31), le=2**31 - 1)

    @model_validator(mode="after")
    def _check_parameters(self) -> ColumnType:
        decimal_params = (self.precision, self.scale)
        timestamp_params = (self.time_unit, self.timezone_offset)

        if self.kind is ColumnKind.DECIMAL75:
            if None in decimal_params:
                raise ValueError("Decimal75 requires precision and scale")
        elif decimal_params != (None, None):
            raise ValueError(f"{self.kind.value} cannot carry precision or scale")

        if self.kind is ColumnKind.TIMESTAMP_TZ:
            if None in timestamp_params:
                raise ValueError("TimestampTZ requires time_unit and timezone_offset")
        elif timestamp_params != (None, None):
            raise ValueError(f"{self.kind.value} cannot carry time_unit or timezone_offset")

        return self


class Bounds(CommitmentModel):
    """Min/max of a column's values; both are None for EMPTY."""

    kind: BoundsKind
    min: int | None = None
    max: int | None = None

    @model_validator(mode="after")
    def _check_limits(self) -> Bounds:
        if self.kind is BoundsKind.EMPTY:
            if self.min is not None or self.max is not None:
                raise ValueError("Empty bounds cannot carry min or max")
        elif self.min is None or self.max is None:
            raise ValueError(f"{self.kind.value} bounds require min and max")
        return self


class ColumnBounds(CommitmentModel):
    """Bounds of a column, tagged with the integer family they are stored in."""

    family: BoundsFamily
    bounds: Bounds | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> ColumnBounds:
        if (self.bounds is None) != (self.family is BoundsFamily.NO_ORDER):
            raise ValueError(f"{self.family.value} bounds mismatch")
        return self


class ColumnCommitmentMetadata(CommitmentModel):
    """Type and bounds recorded for one committed column."""

    column_type: ColumnType
    bounds: ColumnBounds
