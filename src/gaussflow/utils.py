import logging
import sys

LOGGER_NAME = "gaussflow"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _setup_logger(name: str) -> logging.Logger:
    _logger = logging.getLogger(name)
    _logger.setLevel(logging.WARNING)

    # Avoid duplicate handlers on re-import
    if _logger.handlers:
        return _logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _logger.addHandler(handler)
    return _logger


def set_log_level(level: int | str) -> None:
    """Set the level of the package logger (e.g. ``logging.DEBUG`` or ``"INFO"``)."""
    logger.setLevel(level)


logger = _setup_logger(LOGGER_NAME)
