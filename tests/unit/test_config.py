"""Unit tests for run configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from commit_utility.cli.main import build_parser
from commit_utility.config import UtilityConfig


class TestUtilityConfig:
    """Test UtilityConfig construction and validation."""

    def test_defaults(self) -> None:
        """Test stdin/stdout are the defaults."""
        config = UtilityConfig(scheme="ipa")

        assert config.input_path is None
        assert config.output_path is None
        assert config.verbose is False

    def test_paths_coerced(self) -> None:
        """Test string paths become Path objects."""
        config = UtilityConfig(scheme="dory", input_path="in.bin", output_path="out.txt")

        assert config.input_path == Path("in.bin")
        assert config.output_path == Path("out.txt")

    def test_scheme_kept_verbatim(self) -> None:
        """Test the scheme name is not normalized or validated here."""
        assert UtilityConfig(scheme="Not-A-Scheme").scheme == "Not-A-Scheme"
        assert UtilityConfig(scheme="").scheme == ""

    def test_scheme_must_be_string(self) -> None:
        """Test a non-string scheme is rejected."""
        with pytest.raises(TypeError, match="scheme must be a string"):
            UtilityConfig(scheme=None)  # type: ignore[arg-type]


class TestFromArgs:
    """Test building configuration from the argument parser."""

    def test_short_flags(self) -> None:
        """Test -i/-o/-v."""
        args = build_parser().parse_args(["-i", "a.bin", "-o", "b.txt", "--scheme", "DORY", "-v"])
        config = UtilityConfig.from_args(args)

        assert config == UtilityConfig(
            scheme="DORY", input_path=Path("a.bin"), output_path=Path("b.txt"), verbose=True
        )

    def test_long_flags(self) -> None:
        """Test --input/--output."""
        args = build_parser().parse_args(
            ["--input", "a.bin", "--output", "b.txt", "--scheme", "ipa"]
        )
        config = UtilityConfig.from_args(args)

        assert config.input_path == Path("a.bin")
        assert config.output_path == Path("b.txt")
        assert config.verbose is False

    def test_scheme_required(self) -> None:
        """Test --scheme is mandatory."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-i", "a.bin"])

        assert exc_info.value.code == 2
