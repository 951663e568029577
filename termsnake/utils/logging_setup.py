"""
Logging setup.

The terminal belongs to the game while it runs, so records go to a file.
"""
import logging
from pathlib import Path

from .config_loader import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """
    Configure the termsnake logger from configuration.

    Args:
        config: Logging settings

    Returns:
        The package logger
    """
    logger = logging.getLogger("termsnake")
    logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
