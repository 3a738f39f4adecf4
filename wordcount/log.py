"""Logger bootstrap for diagnostics on stderr."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "wordcount"


def setup_logger(level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
