"""
Logging setup
"""

import logging
from typing import Optional

from event_roster.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
