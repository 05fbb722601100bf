from fastapi import Depends
from sqlmodel import Session

from .core.config import settings
from .database import get_session
from .application.ports.audit_logger import AuditLogger
from .application.ports.clock import Clock, RandomSource
from .application.services.auth_service import AuthService
from .application.services.code_store import CodeStore
from .application.services.session_store import SessionStore
from .infrastructure.audit.std_logger import StdAuditLogger, NullAuditLogger
from .infrastructure.notify.log_sender import LogCodeSender
from .infrastructure.persistence.sqlalchemy.repositories.code_repository_sql import SqlVerificationCodeRepository
from .infrastructure.persistence.sqlalchemy.repositories.session_repository_sql import SqlSessionRepository
from .infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository
from .infrastructure.persistence.sqlalchemy.unit_of_work import SqlUnitOfWork
from .infrastructure.system.clock import SystemClock, SecretsRandomSource

_clock = SystemClock()
_random_source = SecretsRandomSource()
_code_sender = LogCodeSender()


def get_clock() -> Clock:
    return _clock


def get_random_source() -> RandomSource:
    return _random_source


def get_audit_logger() -> AuditLogger:
    return StdAuditLogger() if settings.AUDIT_ENABLED else NullAuditLogger()


def get_auth_service(
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock),
    random_source: RandomSource = Depends(get_random_source),
) -> AuthService:
    codes = CodeStore(
        repo=SqlVerificationCodeRepository(session),
        clock=clock,
        random_source=random_source,
        sender=_code_sender,
        ttl_seconds=settings.CODE_TTL_SECONDS,
        code_length=settings.CODE_LENGTH,
    )
    sessions = SessionStore(
        repo=SqlSessionRepository(session),
        clock=clock,
        random_source=random_source,
        ttl_days=settings.SESSION_TTL_DAYS,
        token_bytes=settings.SESSION_TOKEN_BYTES,
    )
    return AuthService(
        user_repo=SqlUserRepository(session),
        codes=codes,
        sessions=sessions,
        clock=clock,
        uow=SqlUnitOfWork(session),
    )
