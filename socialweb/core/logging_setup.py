# File: socialweb/core/logging_setup.py

import logging

from socialweb.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Set the root logger format and level.

    Safe to call more than once; only the level changes on later calls.
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level or settings.log_level)
