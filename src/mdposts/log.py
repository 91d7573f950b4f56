"""Logging setup shared by the library and the CLI.

Modules take a namespaced logger with ``logger = get_logger(__name__)``;
the CLI calls ``configure_logging`` once per invocation.
"""

import logging
import sys


DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
HANDLER_NAME = "mdposts"


def configure_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_FORMAT, stream=None) -> None:
    """Point the package's single stream handler at stream (default stderr) and set the level.

    Safe to call repeatedly; the handler is created once and re-targeted afterwards.
    """
    logger = logging.getLogger("mdposts")
    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    handler.stream = stream or sys.stderr
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
