import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "BRANDLENS_LOG_LEVEL"


def _default_level(name: str) -> int:
    # Library modules stay quiet; the CLI reports progress
    if name.endswith('.cli'):
        return logging.INFO
    return logging.WARNING


def _level_from_env(default: int) -> int:
    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    """
    Return the module logger, attaching a stderr handler on first use.

    The level defaults to WARNING (INFO for the CLI) and can be overridden
    with the BRANDLENS_LOG_LEVEL environment variable.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    logger.setLevel(_level_from_env(_default_level(name)))
    return logger
