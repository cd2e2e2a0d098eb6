"""Logging configuration for the seedmerge package."""
import logging
import sys

from .config import Config

def setup_logger(name: str = "seedmerge", level: int = logging.INFO, force: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the named logger.

    Progress output goes to stdout, so diagnostics stay on stderr.

    Args:
        name: The name of the logger (default: the package logger)
        level: The logging level (default: logging.INFO)
        force: Replace handlers left by an earlier call

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if force:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger
