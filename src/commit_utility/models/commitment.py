"""Single-column commitment values, one type per commitment scheme.

Payloads are kept exactly as they appear on the wire. They are never
decompressed or checked for group membership.
"""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import Field

from .base import CommitmentModel

# Compressed Ristretto point
RISTRETTO_POINT_SIZE = 32
# BLS12-381 target-group element (Fq12), arkworks compressed form
GT_ELEMENT_SIZE = 576


class RistrettoCommitment(CommitmentModel):
    """Inner-product-argument commitment: a compressed Ristretto point."""

    data: bytes = Field(min_length=RISTRETTO_POINT_SIZE, max_length=RISTRETTO_POINT_SIZE)

    debug_name: ClassVar[str | None] = "RistrettoPoint"
    payload_size: ClassVar[int] = RISTRETTO_POINT_SIZE


class DoryCommitment(CommitmentModel):
    """Dory commitment: a target-group element."""

    data: bytes = Field(min_length=GT_ELEMENT_SIZE, max_length=GT_ELEMENT_SIZE)

    payload_size: ClassVar[int] = GT_ELEMENT_SIZE


class DynamicDoryCommitment(CommitmentModel):
    """Dynamic Dory commitment: a target-group element."""

    data: bytes = Field(min_length=GT_ELEMENT_SIZE, max_length=GT_ELEMENT_SIZE)

    payload_size: ClassVar[int] = GT_ELEMENT_SIZE


Commitment = Union[RistrettoCommitment, DoryCommitment, DynamicDoryCommitment]
