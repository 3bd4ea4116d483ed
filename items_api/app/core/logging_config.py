"""
Logging setup for the Items API.

Records from the ``items_api`` loggers and from uvicorn share one
root handler set, so store mutations ("Created item ...") and access
lines end up in the same console stream, and in ``LOG_FILE`` when one
is configured.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn installs its own handlers on these; route them through root.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Later calls, e.g. from a second ``create_app``, leave the existing
    handlers and level alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
