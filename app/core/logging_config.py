"""Logging setup for the app logger tree."""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(log_level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the `app` logger. Safe to call more than once."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger("app")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger
