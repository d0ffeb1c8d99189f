"""Logging utilities for pngme."""

from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "PNGME_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """Configure the root logger and return the numeric level in effect.

    *level* wins over the ``PNGME_LOG_LEVEL`` environment variable, which wins
    over :data:`DEFAULT_LOG_LEVEL`. Unknown level names fall back to WARNING.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric = getattr(logging, log_level, logging.WARNING)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
    return numeric
