"""Logging configuration.

Everything goes to stderr: stdout carries the MCP stdio transport and any
stray byte there corrupts the JSON-RPC stream.
"""

import logging
import sys

LOGGER_NAME = "mcp_server_jira"

_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

# Chatty third-party loggers that would otherwise echo every request.
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logger(level: str = "INFO", name: str = LOGGER_NAME) -> logging.Logger:
    """Return the server logger writing to stderr at ``level``.

    Safe to call more than once: the handler is attached only the first
    time, later calls just adjust the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    for quiet in _QUIET_LOGGERS:
        logging.getLogger(quiet).setLevel(logging.WARNING)

    return logger
