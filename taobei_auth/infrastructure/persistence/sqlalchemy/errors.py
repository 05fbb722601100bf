import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ....application.errors import StorageUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def storage_call(session: Session, operation: str):
    """Roll back and surface driver failures and timeouts as StorageUnavailable."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage error during {operation}: {e.__class__.__name__}: {e}")
        try:
            session.rollback()
        except SQLAlchemyError:
            logger.warning(f"Rollback failed after {operation}")
        raise StorageUnavailable() from e
