"""
Configuration settings for the resume2data pipeline.

Every value can be overridden through the environment (or a `.env` file).
The defaults reproduce the thresholds the heuristics were tuned against.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# Text shorter than this (in characters) counts as "nothing extracted"
MIN_TEXT_LENGTH = int(os.getenv("RESUME2DATA_MIN_TEXT_LENGTH", "100"))

# Fewer text-drawing markers than this in the raw bytes ⇒ scanned PDF
SCANNED_MARKER_THRESHOLD = int(os.getenv("RESUME2DATA_SCANNED_MARKER_THRESHOLD", "10"))

# Words whose vertical positions differ by more than this start a new line
LINE_Y_TOLERANCE = float(os.getenv("RESUME2DATA_LINE_Y_TOLERANCE", "5"))

SUMMARY_MAX_CHARS = int(os.getenv("RESUME2DATA_SUMMARY_MAX_CHARS", "500"))

LOG_LEVEL = os.getenv("RESUME2DATA_LOG_LEVEL", "WARNING")

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Log level name; defaults to RESUME2DATA_LOG_LEVEL.

    Returns:
        The configured ``resume2data`` logger.
    """
    logger = logging.getLogger("resume2data")
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING))

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    return logger
