"""
Logging setup for the showcase application
"""
import logging
import os

_LOG_INITIALIZED = False

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def init_logging(level=None):
    """Configure root logging once; later calls are no-ops"""
    global _LOG_INITIALIZED
    if _LOG_INITIALIZED:
        return
    if level is None:
        level = os.getenv("SHOWCASE_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = LEVEL_MAP.get(level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    _LOG_INITIALIZED = True
