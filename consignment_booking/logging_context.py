"""Session ID logging context for tracing one form session.

Every record passing through a handler carrying ``SessionIdFilter`` gets a
``session_id`` attribute, so a single user's submit and cancel sequence
can be followed through the store and controller logs.

Usage:
    from consignment_booking.logging_context import new_session_id

    new_session_id()
    logger.info("Booking created")  # -> [FORM-3f9a1c2b] Booking created
"""

import logging
import uuid
from contextvars import ContextVar

_session_id: ContextVar[str] = ContextVar("session_id", default="NO_SESSION")


def set_session_id(session_id: str) -> None:
    """Set the correlation ID for the current context."""
    _session_id.set(session_id)


def get_session_id() -> str:
    """Retrieve the current correlation ID."""
    return _session_id.get()


def new_session_id() -> str:
    """Generate, set, and return a fresh session ID."""
    session_id = f"FORM-{uuid.uuid4().hex[:8]}"
    set_session_id(session_id)
    return session_id


class SessionIdFilter(logging.Filter):
    """Injects session_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = _session_id.get()  # type: ignore[attr-defined]
        return True
