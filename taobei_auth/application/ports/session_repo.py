from typing import Optional
from dataclasses import dataclass
from datetime import datetime


@dataclass
class SessionDto:
    id: int
    user_id: str
    token: str
    issued_at: datetime
    expires_at: datetime


class SessionRepository:
    def create(self, user_id: str, token: str, issued_at: datetime, expires_at: datetime) -> SessionDto:
        ...

    def get_by_token(self, token: str) -> Optional[SessionDto]:
        ...
