"""Main CLI entry point for commit_utility."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..config import UtilityConfig
from ..exceptions import CommitUtilityError
from ..pipeline import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the commit-utility command."""
    parser = argparse.ArgumentParser(
        prog="commit-utility",
        description="commit-utility: Deserialize and print a table commitment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  commit-utility --scheme ipa -i table.bin            Print to stdout
  commit-utility --scheme dory -i t.bin -o t.txt      Print to a file
  cat table.bin | commit-utility --scheme dynamic_dory

Schemes: ipa (innerproductargument), dory, dynamic_dory (dynamic-dory)
        """,
    )

    parser.add_argument(
        "-i",
        "--input",
        metavar="PATH",
        help="Input file (defaults to stdin)",
    )

    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help="Output file (defaults to stdout)",
    )

    parser.add_argument(
        "--scheme",
        metavar="NAME",
        required=True,
        help="Commitment scheme (e.g. `ipa`, `dynamic_dory`, `dory`)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"commit-utility {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the commit-utility CLI.

    Args:
        argv: Arguments to parse instead of sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)
    config = UtilityConfig.from_args(args)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(config)
    except CommitUtilityError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
