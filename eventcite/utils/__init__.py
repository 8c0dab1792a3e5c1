"""Utility helpers for eventcite."""

from .logging_config import default_log_level, resolve_log_level, setup_logging

__all__ = [
    "default_log_level",
    "resolve_log_level",
    "setup_logging",
]
