"""
Centralized logging configuration for the option store.

Import this module EARLY to ensure all loggers use the same format.
All other modules should use: `logger = logging.getLogger(__name__)` only.
Do NOT call logging.basicConfig() in any other file.
"""

import logging
import sys
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def resolve_level(name: str) -> int:
    """Map a level name like "debug" to its logging constant, defaulting to INFO."""
    level = getattr(logging, (name or "").upper(), None)
    if isinstance(level, int):
        return level
    return logging.INFO


def setup_logging(root: Optional[logging.Logger] = None):
    """Configure the root logger (or `root`) once. Idempotent, safe to call multiple times."""
    if root is None:
        root = logging.getLogger()

    # Only configure if no handlers exist (prevent duplicate setup)
    if root.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    root.setLevel(resolve_level(settings.LOG_LEVEL))


# Auto-setup on import
setup_logging()
