"""
Unit-of-work helper for the contacts services.

Repositories only ``flush()``; a service wraps each mutation in
``management_transaction`` so the change is committed as one unit, or rolled
back and re-raised.
"""
import logging
from contextlib import contextmanager
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def management_transaction(session: Session, description: str = 'change'):
    """
    Commit the enclosed repository calls, or roll them back on error.

    Usage:
        with management_transaction(session, 'add person'):
            persons_repository.add(person)

    Args:
        session: SQLAlchemy session shared by the repositories
        description: Short label used in log messages

    Yields:
        Session: The same session

    Raises:
        Whatever the block raised, after rollback
    """
    try:
        yield session
        session.commit()
        logger.debug("Committed %s", description)
    except Exception as e:
        session.rollback()
        logger.warning("Rolled back %s: %s", description, e)
        raise
