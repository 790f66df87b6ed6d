"""Input acquisition and output emission.

Reads serialized commitments from a file or standard input and writes
rendered text to a file or standard output. File handles are opened
immediately before use and closed before returning, on error paths too.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO

from .exceptions import (
    CreateOutputFileError,
    OpenInputFileError,
    ReadInputFileError,
    ReadStdinError,
    WriteOutputFileError,
    WriteStdoutError,
)

logger = logging.getLogger(__name__)


def read_input(path: Path | None, stdin: BinaryIO | None = None) -> bytes:
    """Read the full contents of a file, or of standard input.

    Args:
        path: File to read, or None for standard input
        stdin: Binary stream used in place of sys.stdin.buffer

    Returns:
        Every byte of the source

    Raises:
        OpenInputFileError: If the file cannot be opened
        ReadInputFileError: If reading the opened file fails
        ReadStdinError: If standard input cannot be read
    """
    if path is None:
        stream = stdin if stdin is not None else sys.stdin.buffer
        try:
            data = stream.read()
        except OSError as e:
            raise ReadStdinError() from e
        logger.debug("Read %d bytes from stdin", len(data))
        return data

    try:
        handle = open(path, "rb")
    except OSError as e:
        raise OpenInputFileError(str(path)) from e

    try:
        with handle:
            data = handle.read()
    except OSError as e:
        raise ReadInputFileError(str(path)) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def write_output(path: Path | None, text: str, stdout: BinaryIO | None = None) -> None:
    """Write rendered text to a file, or to standard output.

    A file that was created but could not be written is left in place.

    Args:
        path: File to create or truncate, or None for standard output
        text: Rendered text, written as UTF-8
        stdout: Binary stream used in place of sys.stdout.buffer

    Raises:
        CreateOutputFileError: If the file cannot be created
        WriteOutputFileError: If writing the created file fails
        WriteStdoutError: If standard output cannot be written
    """
    data = text.encode("utf-8")

    if path is None:
        stream = stdout if stdout is not None else sys.stdout.buffer
        try:
            stream.write(data)
            stream.flush()
        except OSError as e:
            raise WriteStdoutError() from e
        logger.debug("Wrote %d bytes to stdout", len(data))
        return

    try:
        handle = open(path, "wb")
    except OSError as e:
        raise CreateOutputFileError(str(path)) from e

    # Closing flushes, so a failed close is a failed write
    try:
        with handle:
            handle.write(data)
    except OSError as e:
        raise WriteOutputFileError(str(path)) from e

    logger.debug("Wrote %d bytes to %s", len(data), path)
