"""
Logging infrastructure.

Provides logging utilities for the infrastructure layer.
"""
import logging


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Top-level packages whose loggers get a handler
LOGGER_ROOTS = ("checkout", "apps")


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.
    
    Args:
        name: Logger name (usually module name)
    
    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the ``checkout`` and ``apps`` logger hierarchies once per process.
    
    Args:
        level: Level name from settings (e.g. "INFO", "DEBUG")
    """
    for name in LOGGER_ROOTS:
        get_logger(name).setLevel(logging.getLevelName(level.upper()))
