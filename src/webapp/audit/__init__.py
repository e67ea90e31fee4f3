"""
Audit logging for contacts model changes.

Provides an audit trail of INSERT, UPDATE and DELETE operations on Country and
Person rows, written to a rotating log file.
"""
from .events import init_audit_events, reset_audit_events
from .logger import get_audit_logger, reset_audit_logger


def init_audit(app, logfile_path=None):
    """
    Attach audit logging to a Flask application.

    Args:
        app: Flask application instance
        logfile_path: Path to audit log file (default: app.config['AUDIT_LOG_PATH'])

    Example:
        from webapp.audit import init_audit

        init_audit(app, logfile_path='/var/log/contacts/model_audit.log')
    """
    if logfile_path is None:
        logfile_path = app.config.get('AUDIT_LOG_PATH', '/var/log/contacts/model_audit.log')

    init_audit_events(logfile_path)


__all__ = [
    'init_audit',
    'init_audit_events',
    'reset_audit_events',
    'get_audit_logger',
    'reset_audit_logger',
]
