"""Shared logging setup.

Every entrypoint (API service, migration job) calls `setup_logging` once so
log lines look the same across components.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    Does nothing if the root logger already has handlers (e.g. under pytest, or
    when the app factory runs more than once). The level is still applied.

    Args:
        level: Level name such as "DEBUG" or "INFO" (case-insensitive).
            Unknown names fall back to INFO.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
