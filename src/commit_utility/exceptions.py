"""Exception hierarchy for commit_utility.

Every failure the pipeline can report is one of the closed set of
CommitUtilityError subclasses below. The operator-facing text for each one is
produced by describe_error(), which str() delegates to.
"""

from __future__ import annotations


class CommitUtilityError(Exception):
    """Base exception for all commit_utility pipeline errors."""

    def __str__(self) -> str:
        return describe_error(self)


class OpenInputFileError(CommitUtilityError):
    """Raised when the input file cannot be opened."""

    def __init__(self, filename: str) -> None:
        super().__init__(filename)
        self.filename = filename


class ReadInputFileError(CommitUtilityError):
    """Raised when reading an opened input file fails partway."""

    def __init__(self, filename: str) -> None:
        super().__init__(filename)
        self.filename = filename


class ReadStdinError(CommitUtilityError):
    """Raised when standard input cannot be read to exhaustion."""


class CreateOutputFileError(CommitUtilityError):
    """Raised when the output file cannot be created or truncated."""

    def __init__(self, filename: str) -> None:
        super().__init__(filename)
        self.filename = filename


class WriteOutputFileError(CommitUtilityError):
    """Raised when writing to a created output file fails.

    The file is not removed; it may be left empty or partially written.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(filename)
        self.filename = filename


class WriteStdoutError(CommitUtilityError):
    """Raised when the rendered text cannot be written to standard output."""


class DeserializationError(CommitUtilityError):
    """Raised when bytes do not parse as a table commitment.

    Examples:
        - Truncated data (insufficient bytes)
        - Unknown enum variant index or option tag
        - Invalid UTF-8 in an identifier
        - Commitment payload of the wrong size
        - Trailing bytes after a complete commitment

    The ``detail`` attribute records what went wrong for diagnostics; the
    operator-facing message is always the same.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail


class UnknownSchemeError(CommitUtilityError):
    """Raised when a scheme name matches no known alias.

    ``scheme`` holds the name exactly as the operator supplied it.
    """

    def __init__(self, scheme: str) -> None:
        super().__init__(scheme)
        self.scheme = scheme


class EncodeError(Exception):
    """Raised when a commitment value cannot be encoded.

    Examples:
        - Integer out of range for its wire width
        - Commitment payload of the wrong size
    """

    pass


def describe_error(error: CommitUtilityError) -> str:
    """Return the operator-facing message for a pipeline error.

    Args:
        error: Any CommitUtilityError instance

    Returns:
        Single-line descriptive message
    """
    if isinstance(error, OpenInputFileError):
        return f"Failed to open input file '{error.filename}'"
    if isinstance(error, ReadInputFileError):
        return f"Failed to read from input file '{error.filename}'"
    if isinstance(error, ReadStdinError):
        return "Failed to read from stdin"
    if isinstance(error, CreateOutputFileError):
        return f"Failed to create output file '{error.filename}'"
    if isinstance(error, WriteOutputFileError):
        return f"Failed to write to output file '{error.filename}'"
    if isinstance(error, WriteStdoutError):
        return "Failed to write to stdout"
    if isinstance(error, DeserializationError):
        return "Failed to deserialize commitment"
    if isinstance(error, UnknownSchemeError):
        return f"Unknown scheme: '{error.scheme}'"
    raise TypeError(f"Unhandled error type: {type(error).__name__}")
