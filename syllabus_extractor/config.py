"""
Configuration for the syllabus assignment extractor.

Settings are read from environment variables with sensible defaults so the
CLI, the web app and the tests all share one source of truth.
"""

import logging
import os
import sys
from datetime import datetime

from pytz import utc

# Timezone used to interpret dates found in a document (e.g. "Dec 15" means
# midnight on Dec 15 in this zone)
DEFAULT_TIMEZONE = os.getenv("SYLLABUS_TIMEZONE", "UTC")

# Course label used when the caller does not supply one
DEFAULT_COURSE_NAME = os.getenv("DEFAULT_COURSE_NAME", "Uploaded Syllabus")

# Upload limit for the web app
MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", str(10 * 1024 * 1024)))  # 10MB

PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Seconds to wait on the Canvas API
CANVAS_TIMEOUT = float(os.getenv("CANVAS_TIMEOUT", "30"))

# Extraction constants
TEXT_SAMPLE_LENGTH = 500        # Characters of raw text returned for debugging
MAX_NAME_LENGTH = 100           # Longer names are cut and get an ellipsis
MIN_NAME_LENGTH = 3             # Names must be longer than this
NAME_ELLIPSIS = "..."
EARLIEST_DUE_DATE = datetime(2020, 1, 1, tzinfo=utc)  # Accepted dates are strictly after this

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = "syllabus_extractor", level: str = LOG_LEVEL) -> logging.Logger:
    """Set up a logger with a console handler.

    Args:
        name: Logger name (the package logger by default, so every module
              logger underneath it inherits the handler)
        level: Level name such as "INFO" or "DEBUG"

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    # Remove existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger
