"""
Context-aware logging for wacloud.

Library modules log through ``get_logger(__name__)``; each message is
prefixed with ``[T:<phone_number_id>][U:<wa_id>]`` when that context is known.
Applications that want wacloud's Rich console output call
``setup_app_logging()`` once at startup. The library never configures
logging by itself.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wacloud.core.config.settings import LOG_LEVELS, settings
from wacloud.core.logging.context import current_context

_console = Console(
    theme=Theme(
        {
            "logging.level.debug": "dim white",
            "logging.level.info": "cyan",
            "logging.level.warning": "yellow",
            "logging.level.error": "bold red",
        }
    )
)


class ShortNameFormatter(logging.Formatter):
    """Trim ``wacloud.a.b.c.module`` logger names to ``c.module``."""

    def format(self, record: logging.LogRecord) -> str:
        if record.name.startswith("wacloud."):
            # other handlers share the record
            record = logging.makeLogRecord(record.__dict__)
            record.name = ".".join(record.name.split(".")[-2:])
        return super().format(record)


class ContextLogger:
    """Wraps a ``logging.Logger`` and prefixes messages with tenant/user context.

    Context set through ``set_request_context`` wins over values bound on the
    logger itself.
    """

    def __init__(
        self,
        logger: logging.Logger,
        tenant_id: str | None = None,
        user_id: str | None = None,
    ):
        self.logger = logger
        self.tenant_id = tenant_id
        self.user_id = user_id

    def _prefix(self) -> str:
        context = current_context()
        tenant = context.tenant_id or self.tenant_id
        user = context.user_id or self.user_id
        parts = []
        if tenant:
            parts.append(f"[T:{tenant}]")
        if user:
            parts.append(f"[U:{user}]")
        return "".join(parts)

    def _log(self, level: int, message: str, *args, **kwargs) -> None:
        if not self.logger.isEnabledFor(level):
            return
        prefix = self._prefix()
        if prefix:
            message = f"{prefix} {message}"
        kwargs.setdefault("stacklevel", 3)
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, *args, **kwargs)

    def bind(self, **context: str | None) -> ContextLogger:
        """Return a copy with ``tenant_id`` and/or ``user_id`` replaced.

        Example:
            client_logger = logger.bind(tenant_id="106540352242922")
        """
        return ContextLogger(
            self.logger,
            tenant_id=context.get("tenant_id", self.tenant_id),
            user_id=context.get("user_id", self.user_id),
        )


def setup_logging(
    *,
    level: str = "INFO",
    log_dir: str | Path | None = None,
) -> None:
    """Install a Rich console handler on the root logger.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL; anything else means INFO
        log_dir: When given, also write a daily ``wacloud_YYYYMMDD.log`` file there
    """
    level = level.upper() if level.upper() in LOG_LEVELS else "INFO"

    console = RichHandler(console=_console, rich_tracebacks=True, markup=False)
    console.setFormatter(ShortNameFormatter("[%(name)s] %(message)s"))
    handlers: list[logging.Handler] = [console]

    if log_dir is not None:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        logfile = directory / f"wacloud_{date.today():%Y%m%d}.log"
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(
            ShortNameFormatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger("wacloud").info(
        f"Logging initialized ({level}, file={'on' if log_dir else 'off'})"
    )


def setup_app_logging() -> None:
    """Configure logging from LOG_LEVEL, ENVIRONMENT and LOG_DIR.

    File output is only enabled in the DEV environment.
    """
    setup_logging(
        level=settings.log_level,
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str) -> ContextLogger:
    return ContextLogger(logging.getLogger(name))
