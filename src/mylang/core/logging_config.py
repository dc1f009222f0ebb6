"""
Logging setup for the mylang command line.

Library modules only create loggers; handlers are installed here, once,
by the CLI.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Send mylang log records to stderr at ``level``."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
    logging.getLogger("mylang").setLevel(level)
