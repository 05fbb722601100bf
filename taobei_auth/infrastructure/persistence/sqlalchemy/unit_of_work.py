import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ....application.ports.unit_of_work import UnitOfWork
from .errors import storage_call

logger = logging.getLogger(__name__)


class SqlUnitOfWork(UnitOfWork):
    def __init__(self, session: Session):
        self.session = session

    def commit(self) -> None:
        with storage_call(self.session, "commit"):
            self.session.commit()

    def rollback(self) -> None:
        try:
            self.session.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback failed: {e}")
