"""
Shared logging configuration for the library and CLI.
"""

import logging
import os

from font_descriptor.config.defaults import LOG_LEVEL_DEFAULT, LOG_LEVEL_ENV


def resolve_log_level(value: str | None) -> int:
    """Map a level name to its number; unknown names give the default level."""
    level = logging.getLevelName((value or LOG_LEVEL_DEFAULT).strip().upper())
    if not isinstance(level, int):
        return logging.getLevelName(LOG_LEVEL_DEFAULT)
    return level


logging.basicConfig(
    level=resolve_log_level(os.environ.get(LOG_LEVEL_ENV)),
    format="%(levelname)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger("font_descriptor")
