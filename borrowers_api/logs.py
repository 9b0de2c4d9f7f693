# Shared logger setup.
# Everything goes to stderr: the MCP server owns stdout for JSON-RPC.

import logging
import sys

from .settings import settings

_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(h)
        logger.propagate = False
    logger.setLevel(settings.LOG_LEVEL.upper())
    return logger
