from typing import Optional
from datetime import datetime
from sqlmodel import Session, select

from .....db.models import SessionToken
from .....application.ports.session_repo import SessionRepository, SessionDto
from ..errors import storage_call


class SqlSessionRepository(SessionRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, rec: SessionToken) -> SessionDto:
        return SessionDto(
            id=rec.id,
            user_id=rec.user_id,
            token=rec.token,
            issued_at=rec.issued_at,
            expires_at=rec.expires_at,
        )

    def create(self, user_id: str, token: str, issued_at: datetime, expires_at: datetime) -> SessionDto:
        rec = SessionToken(user_id=user_id, token=token, issued_at=issued_at, expires_at=expires_at)
        with storage_call(self.session, "session token insert"):
            self.session.add(rec)
            self.session.flush()
        return self._to_dto(rec)

    def get_by_token(self, token: str) -> Optional[SessionDto]:
        with storage_call(self.session, "session token lookup"):
            rec = self.session.exec(select(SessionToken).where(SessionToken.token == token)).first()
        return self._to_dto(rec) if rec else None
