import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


def _canon_level(val):
    """
    Normalize a log level name to one of the standard upper-case names:
      - strips whitespace and upper-cases
      - defaults to 'WARNING' when unset/empty/blank
      - falls back to the default for unknown names
    """
    val = (val or "").strip().upper() or DEFAULT_LOG_LEVEL
    if val not in logging.getLevelNamesMapping():
        logger.warning(
            "BOWLING_LOG_LEVEL is not a valid level (got %r); defaulting to %s",
            val,
            DEFAULT_LOG_LEVEL,
        )
        return DEFAULT_LOG_LEVEL
    return val

LOG_LEVEL = _canon_level(os.getenv("BOWLING_LOG_LEVEL"))


def configure_logging(level: str | None = None) -> logging.Logger:
    """Apply ``level`` (or ``BOWLING_LOG_LEVEL``) to the package logger."""
    package_logger = logging.getLogger("bowling_score")
    package_logger.setLevel(_canon_level(level) if level else LOG_LEVEL)
    return package_logger
