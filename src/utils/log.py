from __future__ import annotations

import logging
from typing import Optional

from src.utils.config import get_settings

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for entrypoints (CLI, demo, API).
    Library modules only call logging.getLogger(__name__).
    """
    level = level or get_settings().log_level
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
