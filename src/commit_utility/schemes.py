"""Commitment scheme resolution.

This module provides:
- The closed Scheme enumeration and its case-insensitive alias table
- SCHEME_CODECS, mapping each scheme to its decode and render functions
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable

from .codec import decode_table_commitment, render_table_commitment
from .exceptions import UnknownSchemeError
from .models import DoryCommitment, DynamicDoryCommitment, RistrettoCommitment, TableCommitment

logger = logging.getLogger(__name__)


class Scheme(enum.Enum):
    """Supported commitment schemes."""

    INNER_PRODUCT_ARGUMENT = "InnerProductArgument"
    DORY = "Dory"
    DYNAMIC_DORY = "DynamicDory"


# Lowercase alias -> scheme
SCHEME_ALIASES: dict[str, Scheme] = {
    "dynamic_dory": Scheme.DYNAMIC_DORY,
    "dynamic-dory": Scheme.DYNAMIC_DORY,
    "dory": Scheme.DORY,
    "ipa": Scheme.INNER_PRODUCT_ARGUMENT,
    "innerproductargument": Scheme.INNER_PRODUCT_ARGUMENT,
}


@dataclass(frozen=True)
class SchemeCodec:
    """Decode and render functions for one commitment scheme.

    Attributes:
        decode: Parses serialized bytes; raises DeserializationError on failure
        render: Turns a decoded commitment into deterministic text
    """

    decode: Callable[[bytes], TableCommitment]
    render: Callable[[TableCommitment], str]


SCHEME_CODECS: dict[Scheme, SchemeCodec] = {
    Scheme.INNER_PRODUCT_ARGUMENT: SchemeCodec(
        decode=partial(decode_table_commitment, commitment_type=RistrettoCommitment),
        render=render_table_commitment,
    ),
    Scheme.DORY: SchemeCodec(
        decode=partial(decode_table_commitment, commitment_type=DoryCommitment),
        render=render_table_commitment,
    ),
    Scheme.DYNAMIC_DORY: SchemeCodec(
        decode=partial(decode_table_commitment, commitment_type=DynamicDoryCommitment),
        render=render_table_commitment,
    ),
}


def resolve_scheme(name: str) -> Scheme:
    """Resolve an operator-supplied scheme name.

    Matching is case-insensitive and exact against SCHEME_ALIASES.

    Args:
        name: Scheme name as given on the command line

    Returns:
        The matching scheme

    Raises:
        UnknownSchemeError: If no alias matches; carries ``name`` unchanged

    Example:
        >>> resolve_scheme("Dynamic-Dory")
        <Scheme.DYNAMIC_DORY: 'DynamicDory'>
    """
    scheme = SCHEME_ALIASES.get(name.lower())
    if scheme is None:
        raise UnknownSchemeError(name)

    logger.debug("Resolved scheme %r to %s", name, scheme.value)
    return scheme


def decode_and_render(scheme: Scheme, data: bytes) -> str:
    """Decode bytes under a scheme and render the result.

    Raises:
        DeserializationError: If the bytes don't parse under the scheme
    """
    codec = SCHEME_CODECS[scheme]
    return codec.render(codec.decode(data))
