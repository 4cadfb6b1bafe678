"""
Logging setup for the registry.

Storage and API modules log through ``logging.getLogger(__name__)``;
this module attaches handlers to the root logger once per process so
those records reach the console (and optionally a file).
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Does nothing if the root logger already has handlers, which is the
    case under pytest or when ``create_app`` is called more than once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Optional file receiving the same records as the console.  Its
        parent directory is created if missing.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
