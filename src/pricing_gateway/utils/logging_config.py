"""
Centralized logging configuration for the gateway.
"""
import logging


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure console logging for the package.

    Args:
        level: Level name for the `pricing_gateway` logger (INFO by default)

    Returns:
        The package logger
    """
    logger = logging.getLogger("pricing_gateway")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Avoid duplicate handlers when the app is created more than once
    if not any(getattr(h, "_pricing_gateway", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._pricing_gateway = True
        logger.addHandler(handler)

    return logger

