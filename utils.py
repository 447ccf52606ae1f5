import logging
import os

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Set up and return a logger with the specified name.

    The level comes from the LOG_LEVEL environment variable (default INFO).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    return logger


def placeholder_assignment(var_name: str) -> str:
    """Build the `NAME=your_name_here` hint printed for a missing variable."""
    return f"{var_name}=your_{var_name.lower()}_here"
