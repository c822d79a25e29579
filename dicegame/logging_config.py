"""Logging setup for the command line entry points."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Send diagnostics to stderr so they never mix with the game prompts.

    Args:
        level: Log level name; defaults to ``settings.log_level``
    """
    from dicegame.config import settings

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
