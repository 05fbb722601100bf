from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from ..ports.clock import Clock, RandomSource
from ..ports.session_repo import SessionRepository, SessionDto

SESSION_TTL_DAYS = 7
SESSION_TOKEN_BYTES = 32


@dataclass
class SessionStore:
    repo: SessionRepository
    clock: Clock
    random_source: RandomSource
    ttl_days: int = SESSION_TTL_DAYS
    token_bytes: int = SESSION_TOKEN_BYTES

    def issue(self, user_id: str) -> SessionDto:
        issued_at = self.clock.now()
        return self.repo.create(
            user_id=user_id,
            token=self.random_source.token_hex(self.token_bytes),
            issued_at=issued_at,
            expires_at=issued_at + timedelta(days=self.ttl_days),
        )

    def resolve(self, token: str) -> Optional[SessionDto]:
        return self.repo.get_by_token(token)
