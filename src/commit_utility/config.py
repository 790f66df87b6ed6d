"""Run configuration for the commit utility.

This module provides the dataclass one invocation is driven by, built from
parsed command-line arguments.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass
class UtilityConfig:
    """Configuration for a single decode-and-render run.

    Attributes:
        scheme: Commitment scheme name exactly as supplied; resolved later so
            an unknown name is reported with its original spelling.
        input_path: File holding the serialized commitment, or None to read
            standard input.
        output_path: File to write the rendering to, or None to write
            standard output.
        verbose: Emit debug logging on stderr.

    Examples:
        ```python
        from commit_utility.config import UtilityConfig
        from commit_utility.pipeline import run

        # stdin -> stdout
        run(UtilityConfig(scheme="ipa"))

        # file -> file
        run(UtilityConfig(scheme="dory", input_path="table.bin", output_path="table.txt"))
        ```
    """

    scheme: str
    input_path: Path | None = None
    output_path: Path | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.scheme, str):
            raise TypeError(f"scheme must be a string, got {type(self.scheme).__name__}")

        if self.input_path is not None:
            self.input_path = Path(self.input_path)
        if self.output_path is not None:
            self.output_path = Path(self.output_path)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> UtilityConfig:
        """Build a configuration from parsed command-line arguments."""
        return cls(
            scheme=args.scheme,
            input_path=args.input,
            output_path=args.output,
            verbose=args.verbose,
        )
