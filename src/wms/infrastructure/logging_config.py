"""Process-wide logging setup shared by the console and the API."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Libraries that are chatty at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the root logger.

    Calling it again replaces the handler, so it always writes to the
    current ``sys.stderr``.
    """
    global _handler

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
