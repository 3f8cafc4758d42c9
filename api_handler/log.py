"""
Logging setup for host applications.

The library itself only emits records through module loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from api_handler.config import get_default_config


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure root logging; level defaults to the runtime config's log_level."""
    level = level or get_default_config().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
