from typing import Optional
from datetime import datetime
from sqlmodel import Session, select

from .....db.models import VerificationCode
from .....application.ports.code_repo import VerificationCodeRepository, VerificationCodeDto
from ..errors import storage_call


class SqlVerificationCodeRepository(VerificationCodeRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, rec: VerificationCode) -> VerificationCodeDto:
        return VerificationCodeDto(
            id=rec.id,
            phone=rec.phone,
            code=rec.code,
            issued_at=rec.issued_at,
            expires_at=rec.expires_at,
        )

    def append(self, phone: str, code: str, issued_at: datetime, expires_at: datetime) -> VerificationCodeDto:
        rec = VerificationCode(phone=phone, code=code, issued_at=issued_at, expires_at=expires_at)
        with storage_call(self.session, "verification code insert"):
            self.session.add(rec)
            self.session.flush()
        return self._to_dto(rec)

    def latest_for_phone(self, phone: str) -> Optional[VerificationCodeDto]:
        with storage_call(self.session, "verification code lookup"):
            rec = self.session.exec(
                select(VerificationCode)
                .where(VerificationCode.phone == phone)
                .order_by(VerificationCode.id.desc())
                .limit(1)
            ).first()
        return self._to_dto(rec) if rec else None
