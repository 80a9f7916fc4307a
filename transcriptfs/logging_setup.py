"""Console logging setup for the ``transcriptfs`` logger hierarchy."""

from __future__ import annotations

import logging

LOGGER_NAME = "transcriptfs"
LOG_FORMAT = "[%(name)s][%(asctime)s] %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S"
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str = "warning") -> logging.Logger:
    """Attach one stderr handler to the package logger at ``level``.

    Repeated calls only adjust the level; unknown level names raise
    ``ValueError``.
    """
    try:
        numeric_level = LOG_LEVELS[level.lower()]
    except KeyError as exc:
        raise ValueError(f"unknown log level: {level!r}") from exc

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(numeric_level)
    return logger
