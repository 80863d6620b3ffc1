import logging
import sys
from typing import Optional

from ..settings import RuntimeSettings, load_settings


def setup_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """Attach a stdout handler to the package logger (once).

    `name` and `level` fall back to `WATCHLIST_LOGGER_NAME` /
    `WATCHLIST_LOG_LEVEL`. The environment is only consulted when one of
    them is missing.
    """
    if name is None or level is None:
        settings: RuntimeSettings = load_settings()
        name = name or settings.logger_name
        level = level or settings.log_level
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger
