"""Postcard codec for table commitments.

This module provides decoding of the producer's compact binary form into
typed table commitments, the matching encoder, and deterministic rendering
to text.
"""

from __future__ import annotations

from .decoder import decode_table_commitment
from .encoder import encode_table_commitment
from .postcard import PostcardReader, PostcardWriter
from .render import render_table_commitment

__all__ = [
    "decode_table_commitment",
    "encode_table_commitment",
    "render_table_commitment",
    "PostcardReader",
    "PostcardWriter",
]
