"""View-session logging context for tracing one screen's lifecycle.

Provides a view_id-aware logger that attaches a session ID to every
log message, making it easy to follow a single view from activation
through fetch, filtering and export.

Usage:
    from autoservice.logging_context import get_view_logger, set_view_id

    set_view_id("VIEW-abc123")
    logger = get_view_logger(__name__)
    logger.info("Fetching bookings")  # -> [VIEW-abc123] Fetching bookings
"""

import logging
import uuid
from contextvars import ContextVar

_view_id: ContextVar[str] = ContextVar("view_id", default="-")


def new_view_id() -> str:
    """Generate a fresh session ID for a view activation."""
    return f"VIEW-{uuid.uuid4().hex[:8]}"


def set_view_id(view_id: str) -> None:
    """Set the session ID for the current context."""
    _view_id.set(view_id)


def get_view_id() -> str:
    """Retrieve the current session ID."""
    return _view_id.get()


class ViewIdFilter(logging.Filter):
    """Injects view_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.view_id = _view_id.get()  # type: ignore[attr-defined]
        return True


def get_view_logger(name: str) -> logging.Logger:
    """Return a logger with the ViewIdFilter attached.

    The filter adds ``view_id`` to each record so formatters can
    include ``%(view_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, ViewIdFilter) for f in logger.filters):
        logger.addFilter(ViewIdFilter())
    return logger
