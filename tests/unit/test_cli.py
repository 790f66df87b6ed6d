"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from commit_utility import Scheme, __version__, decode_and_render, resolve_scheme

MIXED_CASE_ALIASES = {
    Scheme.INNER_PRODUCT_ARGUMENT: "IPA",
    Scheme.DORY: "Dory",
    Scheme.DYNAMIC_DORY: "Dynamic_Dory",
}


def _run_cli(*args: str, stdin: bytes = b"") -> subprocess.CompletedProcess[bytes]:
    return subprocess.run(
        [sys.executable, "-m", "commit_utility.cli.main", *args],
        input=stdin,
        capture_output=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run_cli("--help")

    assert result.returncode == 0
    assert b"commit-utility: Deserialize and print a table commitment" in result.stdout
    assert b"--scheme" in result.stdout
    assert b"--input" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run_cli("--version")

    assert result.returncode == 0
    assert f"commit-utility {__version__}".encode() in result.stdout


def test_cli_missing_scheme() -> None:
    """Test --scheme is required."""
    result = _run_cli()

    assert result.returncode == 2
    assert b"--scheme" in result.stderr


def test_cli_stdin_to_stdout(ipa_bytes: bytes) -> None:
    """Test piped bytes are rendered exactly to stdout."""
    result = _run_cli("--scheme", "ipa", stdin=ipa_bytes)

    assert result.returncode == 0
    expected = decode_and_render(resolve_scheme("ipa"), ipa_bytes)
    assert result.stdout == expected.encode("utf-8")
    assert result.stderr == b""


def test_cli_file_to_file(tmp_path: Path, scheme: Scheme, encoded_commitment: bytes) -> None:
    """Test --input and --output for every scheme."""
    input_path = tmp_path / "commitment.bin"
    output_path = tmp_path / "commitment.txt"
    input_path.write_bytes(encoded_commitment)

    result = _run_cli(
        "-i", str(input_path), "-o", str(output_path), "--scheme", MIXED_CASE_ALIASES[scheme]
    )

    assert result.returncode == 0
    assert result.stdout == b""
    assert output_path.read_text(encoding="utf-8") == decode_and_render(
        scheme, encoded_commitment
    )


def test_cli_missing_input(tmp_path: Path) -> None:
    """Test a nonexistent --input path."""
    missing = tmp_path / "missing.bin"
    output_path = tmp_path / "out.txt"

    result = _run_cli("--input", str(missing), "--output", str(output_path), "--scheme", "dory")

    assert result.returncode == 1
    assert f"Error: Failed to open input file '{missing}'".encode() in result.stderr
    assert not output_path.exists()


def test_cli_unknown_scheme(ipa_bytes: bytes) -> None:
    """Test an unknown scheme is reported with its original spelling."""
    result = _run_cli("--scheme", "Not-A-Scheme", stdin=ipa_bytes)

    assert result.returncode == 1
    assert b"Error: Unknown scheme: 'Not-A-Scheme'" in result.stderr
    assert result.stdout == b""


def test_cli_corrupt_input(ipa_bytes: bytes) -> None:
    """Test truncated bytes produce no partial output."""
    result = _run_cli("--scheme", "ipa", stdin=ipa_bytes[:-3])

    assert result.returncode == 1
    assert b"Error: Failed to deserialize commitment" in result.stderr
    assert result.stdout == b""


def test_cli_unwritable_output(tmp_path: Path, ipa_bytes: bytes) -> None:
    """Test an --output path inside a missing directory."""
    output_path = tmp_path / "no-such-dir" / "out.txt"

    result = _run_cli("--scheme", "ipa", "--output", str(output_path), stdin=ipa_bytes)

    assert result.returncode == 1
    assert f"Error: Failed to create output file '{output_path}'".encode() in result.stderr


def test_cli_verbose_logs_to_stderr(ipa_bytes: bytes) -> None:
    """Test --verbose diagnostics stay off stdout."""
    result = _run_cli("--scheme", "ipa", "--verbose", stdin=ipa_bytes)

    assert result.returncode == 0
    assert result.stdout.startswith(b"TableCommitment {")
    assert b"DEBUG" in result.stderr
    assert b"Resolved scheme 'ipa'" in result.stderr


def test_cli_package_main(ipa_bytes: bytes) -> None:
    """Test python -m commit_utility."""
    result = subprocess.run(
        [sys.executable, "-m", "commit_utility", "--scheme", "ipa"],
        input=ipa_bytes,
        capture_output=True,
    )

    assert result.returncode == 0
    assert result.stdout.startswith(b"TableCommitment {")


def test_cli_trailing_newline(ipa_bytes: bytes) -> None:
    """Test an artifact ending in a newline renders like the bare bytes."""
    result = _run_cli("--scheme", "ipa", stdin=ipa_bytes + b"\n")

    assert result.returncode == 0
    assert result.stdout == decode_and_render(resolve_scheme("ipa"), ipa_bytes).encode("utf-8")


def test_cli_invalid_point() -> None:
    """Test a corrupted IPA point is a deserialization failure."""
    result = _run_cli("--scheme", "ipa", stdin=b"\x01" + b"\xff" * 32 + b"\x00\x00\x04")

    assert result.returncode == 1
    assert b"Error: Failed to deserialize commitment" in result.stderr
    assert result.stdout == b""
