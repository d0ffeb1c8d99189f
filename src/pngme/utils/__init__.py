"""Utility helpers for pngme."""

from .logging import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, configure_logging

__all__ = ["DEFAULT_LOG_LEVEL", "LOG_LEVEL_ENV", "configure_logging"]
