"""Top-level decode-and-render pipeline."""

from __future__ import annotations

import logging

from .config import UtilityConfig
from .schemes import decode_and_render, resolve_scheme
from .streams import read_input, write_output

logger = logging.getLogger(__name__)


def run(config: UtilityConfig) -> None:
    """Read, resolve, decode, render and write, strictly in that order.

    The first failure propagates and no later stage runs.

    Args:
        config: Run configuration

    Raises:
        CommitUtilityError: Whichever stage failed first
    """
    data = read_input(config.input_path)
    scheme = resolve_scheme(config.scheme)
    text = decode_and_render(scheme, data)
    write_output(config.output_path, text)
    logger.info("Rendered %s commitment (%d bytes)", scheme.value, len(data))
