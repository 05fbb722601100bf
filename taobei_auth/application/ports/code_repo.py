from typing import Optional
from dataclasses import dataclass
from datetime import datetime


@dataclass
class VerificationCodeDto:
    id: int
    phone: str
    code: str
    issued_at: datetime
    expires_at: datetime


class VerificationCodeRepository:
    def append(self, phone: str, code: str, issued_at: datetime, expires_at: datetime) -> VerificationCodeDto:
        ...

    def latest_for_phone(self, phone: str) -> Optional[VerificationCodeDto]:
        ...
