"""
Logging setup for applications embedding the engine.

The engine itself only creates module loggers; the host decides
where records go by calling setup_logging() once at startup.
"""

import logging
import sys
from typing import Optional

from trailgeo.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging to stdout.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to settings.log_level.
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at %s", level_name)
