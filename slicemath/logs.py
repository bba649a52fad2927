# slicemath/logs.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from slicemath.config import Settings, settings

LOGGER_NAME = "slicemath"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(cfg: Settings = settings) -> logging.Logger:
    """Apply ``cfg`` to the ``slicemath`` logger.

    Safe to call repeatedly: the stream handler is attached once, and a file
    handler is attached the first time a call carries ``log_file``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(cfg.log_level)
    fmt = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(fmt)
        logger.addHandler(stream_handler)

    has_file = any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    if cfg.log_file and not has_file:
        log_file = Path(cfg.log_file)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
            file_handler.setFormatter(fmt)
            logger.addHandler(file_handler)
        except OSError as exc:
            logger.warning("Failed to initialize file logging at %s: %s", log_file, exc)

    logger.propagate = False
    return logger
