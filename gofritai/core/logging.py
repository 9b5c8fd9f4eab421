import logging
import sys

from gofritai.core.config.schema import LOG_LEVELS

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def normalize_log_level(raw_level: str | None) -> str:
    """Return a valid level name, falling back to WARNING.

    Only the first word is used so that values like ``"INFO  # verbose"``
    copied from a .env file still work.
    """
    if not raw_level or not raw_level.strip():
        return DEFAULT_LOG_LEVEL
    level = raw_level.split()[0].upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def configure_root_logging(log_level: str | None = None, *, verbose: bool = False) -> str:
    """Install a single stderr handler on the root logger.

    Existing root handlers are replaced, so calling this more than once is safe.

    Returns:
        The level name that was applied.
    """
    level = "DEBUG" if verbose else normalize_log_level(log_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))

    logging.getLogger(__name__).debug(f"Logging configured at {level}")
    return level
