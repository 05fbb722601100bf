from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from ..ports.clock import Clock, RandomSource
from ..ports.code_repo import VerificationCodeRepository, VerificationCodeDto
from ..ports.code_sender import CodeSender

CODE_TTL_SECONDS = 60
CODE_LENGTH = 6


@dataclass
class CodeStore:
    """Append-only log of issued verification codes.

    Every issue appends a new record; nothing is overwritten or deleted.
    The active code for a phone is simply the latest record, judged against
    the clock by the caller.
    """

    repo: VerificationCodeRepository
    clock: Clock
    random_source: RandomSource
    sender: CodeSender
    ttl_seconds: int = CODE_TTL_SECONDS
    code_length: int = CODE_LENGTH

    def issue(self, phone: str) -> VerificationCodeDto:
        code = self.random_source.digits(self.code_length)
        issued_at = self.clock.now()
        record = self.repo.append(
            phone=phone,
            code=code,
            issued_at=issued_at,
            expires_at=issued_at + timedelta(seconds=self.ttl_seconds),
        )
        self.sender.send(phone, code)
        return record

    def most_recent(self, phone: str) -> Optional[VerificationCodeDto]:
        return self.repo.latest_for_phone(phone)
