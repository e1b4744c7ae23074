"""
wacloud core components: environment settings and logging.
"""

from .config.settings import settings
from .logging import get_logger, setup_app_logging, setup_logging

__all__ = ["settings", "get_logger", "setup_logging", "setup_app_logging"]
