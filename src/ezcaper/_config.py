import logging
import os

from .policy import PolicyName

_DEFAULT_LOG_LEVEL = "WARNING"


def log_level() -> int:
    """Logging level for the CLI (respects ``EZCAPER_LOG_LEVEL``)."""
    name = os.environ.get("EZCAPER_LOG_LEVEL", "").strip().upper() or _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logging.getLogger(__name__).warning(
            f"ignoring unknown EZCAPER_LOG_LEVEL {name!r}"
        )
        return logging.getLevelName(_DEFAULT_LOG_LEVEL)
    return level


def default_policy() -> PolicyName:
    """Invalid byte policy used when the CLI gets no flag (``EZCAPER_LOSSY=1``)."""
    if os.environ.get("EZCAPER_LOSSY", "").strip() == "1":
        return "lossy"
    return "exact"
