"""Logging configuration for the storefront CLI.

Library modules only ever call ``logging.getLogger(__name__)``; this is
the one place that attaches handlers.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send storefront logs to stderr.

    INFO by default, DEBUG when *verbose*.  stderr keeps log lines out
    of command output such as a printed share link.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
