"""Logging module for wacloud."""

from .context import clear_request_context, set_request_context
from .logger import ContextLogger, get_logger, setup_app_logging, setup_logging

__all__ = [
    "ContextLogger",
    "get_logger",
    "setup_logging",
    "setup_app_logging",
    "set_request_context",
    "clear_request_context",
]
