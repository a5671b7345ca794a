import logging
from typing import Optional

from .config import LoggingConfig

PACKAGE_LOGGER = "recordkeeper"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)

    return logger
