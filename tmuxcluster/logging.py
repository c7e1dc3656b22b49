"""Logging configuration for the tmuxcluster package."""
import logging
import sys

from tmuxcluster.config import Config

def setup_logging(debug: bool = False, name: str = "tmuxcluster") -> logging.Logger:
    """
    Set up the package logger.

    Log records go to stderr so that dump output on stdout stays clean.

    Args:
        debug: Force DEBUG level regardless of LOG_LEVEL
        name: The name of the logger (default: the package logger)

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if debug else getattr(logging, Config.LOG_LEVEL, logging.WARNING)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Don't add handlers if they're already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(Config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
