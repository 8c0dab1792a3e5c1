import logging
import os
from pathlib import Path
from typing import Optional

LOG_LEVEL_ENV = "EVENTCITE_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "INFO")


def resolve_log_level(level: Optional[str]) -> int:
    """Map a level name to its numeric value, falling back to INFO for unknown names."""
    name = (level or default_log_level()).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Route eventcite log records to stderr, or to ``log_file`` when given.

    ``level`` comes from ``--log-level`` or the config file; when neither sets
    it, ``EVENTCITE_LOG_LEVEL`` decides.
    """
    handler_kwargs = {}
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler_kwargs["filename"] = log_file

    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT, **handler_kwargs)
