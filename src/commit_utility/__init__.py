"""commit_utility: Table Commitment Inspector

A diagnostic tool that deserializes table commitments written by the
Proof of SQL prover and prints them in a deterministic, human-readable form.

Key Features:
- Inner product argument (IPA), Dory and Dynamic Dory commitments
- All-or-nothing postcard decoding with canonical point checks
- Stable pretty-printed output, byte-identical for identical input
- Pydantic models for the decoded structure

Quick Start:
    >>> from commit_utility import decode_and_render, resolve_scheme
    >>>
    >>> scheme = resolve_scheme("dory")
    >>> with open("table.bin", "rb") as f:
    ...     print(decode_and_render(scheme, f.read()))

Command line:
    $ commit-utility --scheme ipa --input table.bin
"""

from __future__ import annotations

from .codec import decode_table_commitment, encode_table_commitment, render_table_commitment
from .config import UtilityConfig
from .exceptions import (
    CommitUtilityError,
    CreateOutputFileError,
    DeserializationError,
    EncodeError,
    OpenInputFileError,
    ReadInputFileError,
    ReadStdinError,
    UnknownSchemeError,
    WriteOutputFileError,
    WriteStdoutError,
    describe_error,
)
from .models import (
    ColumnCommitments,
    DoryCommitment,
    DynamicDoryCommitment,
    RistrettoCommitment,
    TableCommitment,
)
from .pipeline import run
from .schemes import SCHEME_CODECS, Scheme, SchemeCodec, decode_and_render, resolve_scheme
from .streams import read_input, write_output

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Scheme",
    "SchemeCodec",
    "SCHEME_CODECS",
    "resolve_scheme",
    "decode_and_render",
    "decode_table_commitment",
    "encode_table_commitment",
    "render_table_commitment",
    # Pipeline
    "UtilityConfig",
    "run",
    "read_input",
    "write_output",
    # Models
    "TableCommitment",
    "ColumnCommitments",
    "RistrettoCommitment",
    "DoryCommitment",
    "DynamicDoryCommitment",
    # Exceptions
    "CommitUtilityError",
    "OpenInputFileError",
    "ReadInputFileError",
    "ReadStdinError",
    "CreateOutputFileError",
    "WriteOutputFileError",
    "WriteStdoutError",
    "DeserializationError",
    "UnknownSchemeError",
    "EncodeError",
    "describe_error",
    # Version
    "__version__",
]
