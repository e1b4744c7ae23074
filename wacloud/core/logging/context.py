"""
Per-task logging context.

``tenant_id`` is the phone number ID a client acts for and ``user_id`` is the
WhatsApp ID of the customer a call or webhook concerns. Values live in
contextvars, so concurrent tasks never see each other's context.
"""

from contextvars import ContextVar
from typing import NamedTuple


class LogContext(NamedTuple):
    tenant_id: str | None = None
    user_id: str | None = None


_context: ContextVar[LogContext] = ContextVar("wacloud_log_context", default=LogContext())


def set_request_context(
    tenant_id: str | None = None,
    user_id: str | None = None,
) -> None:
    """Update the context of the current task; ``None`` keeps the old value."""
    current = _context.get()
    _context.set(
        LogContext(
            tenant_id=current.tenant_id if tenant_id is None else tenant_id,
            user_id=current.user_id if user_id is None else user_id,
        )
    )


def current_context() -> LogContext:
    return _context.get()


def clear_request_context() -> None:
    _context.set(LogContext())


def get_context_info() -> dict[str, str | None]:
    """Return the current context as a plain dict, for debugging."""
    return current_context()._asdict()
