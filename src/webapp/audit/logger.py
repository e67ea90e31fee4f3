"""
Audit logging infrastructure for contacts model changes.

Provides rotating file logger for tracking database changes.
"""
import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path

AUDIT_LOGGER_NAME = "model_audit"
FALLBACK_LOG_NAME = "contacts_audit.log"


def ensure_log_directory(logfile_path):
    """
    Ensure log directory exists and is writable.

    Args:
        logfile_path: Desired log file path

    Returns:
        str: Usable log file path (may fall back to temp directory)
    """
    log_dir = Path(logfile_path).parent

    try:
        log_dir.mkdir(parents=True, exist_ok=True)

        probe = log_dir / '.write_test'
        probe.touch()
        probe.unlink()

        return str(logfile_path)
    except OSError as e:
        fallback_path = os.path.join(tempfile.gettempdir(), FALLBACK_LOG_NAME)
        logging.getLogger(__name__).warning(
            "Could not use audit log directory %s (%s); falling back to %s",
            log_dir, e, fallback_path
        )
        return fallback_path


def get_audit_logger(logfile_path):
    """
    Get or create the audit logger with a rotating file handler.

    Configured once per process; later calls return the same logger.

    Args:
        logfile_path: Path to audit log file

    Returns:
        logging.Logger: Configured audit logger
    """
    logger = logging.getLogger(AUDIT_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if not logger.handlers:
        logfile_path = ensure_log_directory(logfile_path)

        # 10 MB files, 5 backups
        handler = RotatingFileHandler(
            logfile_path,
            maxBytes=10_000_000,
            backupCount=5,
            encoding='utf-8'
        )
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(handler)

    return logger


def reset_audit_logger():
    """Close and detach the audit handlers (tests switch log files)."""
    logger = logging.getLogger(AUDIT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
