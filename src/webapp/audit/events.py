"""
SQLAlchemy event handlers for audit logging.

Registers a before_flush listener that records INSERT, UPDATE and DELETE of
Country and Person rows.
"""
import uuid
from datetime import date

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from contacts.base import Base
from .logger import get_audit_logger


_AUDIT_EVENTS_REGISTERED = False
_listener = None


def responsible_client():
    """
    Identify who triggered the change.

    Returns:
        str: Remote address of the current request, or "cli" outside a request
    """
    from flask import has_request_context, request

    if has_request_context():
        return request.remote_addr or "unknown"
    return "cli"


def should_track(obj):
    """Only contacts models are audited."""
    return isinstance(obj, Base)


def get_primary_key(obj):
    identity = inspect(obj).identity
    if identity is None:
        # New rows: the key is assigned by the service before flush
        mapper = inspect(obj).mapper
        identity = tuple(getattr(obj, attr.key) for attr in mapper.column_attrs
                         if attr.columns[0].primary_key)
    return tuple(str(v) if isinstance(v, uuid.UUID) else v for v in identity)


def _serializable(value):
    if isinstance(value, (date, uuid.UUID)):
        return str(value)
    return value


def diff_for_object(obj):
    """
    Extract changed column attributes and their old/new values.

    Returns:
        dict: {attribute: {'old': value, 'new': value}}
    """
    insp = inspect(obj)
    changes = {}

    for attr in insp.mapper.column_attrs:
        hist = insp.attrs[attr.key].history
        if hist.has_changes():
            changes[attr.key] = {
                "old": _serializable(hist.deleted[0] if hist.deleted else None),
                "new": _serializable(hist.added[0] if hist.added else None),
            }

    return changes


def init_audit_events(logfile_path):
    """
    Register the before_flush audit listener on all sessions.

    Safe to call repeatedly; only the first call registers.

    Args:
        logfile_path: Path to audit log file
    """
    global _AUDIT_EVENTS_REGISTERED, _listener

    if _AUDIT_EVENTS_REGISTERED:
        return

    logger = get_audit_logger(logfile_path)

    def before_flush(session, flush_context, instances):
        client = responsible_client()

        for obj in session.new:
            if should_track(obj):
                logger.info(
                    f"client={client} action=INSERT model={obj.__class__.__name__} "
                    f"pk={get_primary_key(obj)} obj={obj!r}"
                )

        for obj in session.dirty:
            if should_track(obj) and session.is_modified(obj, include_collections=False):
                changes = diff_for_object(obj)
                if changes:
                    logger.info(
                        f"client={client} action=UPDATE model={obj.__class__.__name__} "
                        f"pk={get_primary_key(obj)} changes={changes}"
                    )

        for obj in session.deleted:
            if should_track(obj):
                logger.info(
                    f"client={client} action=DELETE model={obj.__class__.__name__} "
                    f"pk={get_primary_key(obj)} obj={obj!r}"
                )

    event.listen(Session, "before_flush", before_flush)
    _listener = before_flush
    _AUDIT_EVENTS_REGISTERED = True


def reset_audit_events():
    """
    Remove the audit listener and allow re-registration.

    Primarily for tests that point the audit log at a temporary file.
    """
    global _AUDIT_EVENTS_REGISTERED, _listener

    if _listener is not None and event.contains(Session, "before_flush", _listener):
        event.remove(Session, "before_flush", _listener)
    _listener = None
    _AUDIT_EVENTS_REGISTERED = False
