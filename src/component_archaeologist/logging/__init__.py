"""Logging module for Component Archaeologist."""

from .logger import get_logger, mark_logging_configured, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "mark_logging_configured",
]
