# src/dictweb/logging_setup.py
"""
Logging for dictweb.

One "dictweb" logger with a stream handler; modules log through children
of it (dictweb.cache, dictweb.lookup, ...). Lines carry date, milliseconds
and file:line so a request can be followed through the pipeline.
"""

import logging

LOGGER_NAME = "dictweb"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

_configured = False


def parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Map 'debug', 'INFO', ... to a logging level; fall back to default."""
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the dictweb logger once; later calls only change the level."""
    global _configured

    if isinstance(level, str):
        level = parse_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    logger.setLevel(level)
    return logger


def get_logger(name: str = "") -> logging.Logger:
    """Child logger under "dictweb"."""
    base = logging.getLogger(LOGGER_NAME)
    return base.getChild(name) if name else base
