# File: wordharvest/core/logging_setup.py

import logging
import sys
from typing import Optional

from wordharvest.core.config.settings import settings

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Routes all wordharvest logs to stderr, keeping stdout free for reports."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
