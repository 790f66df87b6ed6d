"""Base model class shared by every decoded commitment structure."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class CommitmentModel(BaseModel):
    """Base class for all decoded commitment structures.

    Decoded values are immutable: they are produced once from bytes and only
    ever read afterwards.

    Attributes:
        debug_name: Type name used when the value is rendered. Defaults to the
            class name; set it where the producer's type name differs.
    """

    model_config = ConfigDict(
        # Decoded values are never mutated
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    debug_name: ClassVar[str | None] = None

    @classmethod
    def type_name(cls) -> str:
        """Return the name this structure is rendered under."""
        return cls.debug_name or cls.__name__
