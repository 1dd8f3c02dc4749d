"""
Runtime configuration for the heapkit command-line tool.

Defaults come from the environment so they can be set once per shell:
- HEAPKIT_LOG_LEVEL: root log level used by the CLI (default WARNING).
"""

import logging
import os

LOG_LEVEL = os.environ.get("HEAPKIT_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Configure the root logger for CLI use.

    Accepts a level name ("DEBUG", "info", ...). Unknown names raise
    ValueError so argparse can surface them as usage errors.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level!r}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=True)
