"""
tests/conftest.py -- Shared fakes and fixtures.

  - FakeClock / FakeRandomSource: deterministic time and code/token generation
  - Fake*Repo: in-memory stand-ins for the SQL repositories
  - FakeUnitOfWork: counts commits and rollbacks
  - auth: an AuthService wired to the fakes
  - sql_engine / sql_session: in-memory SQLite with the real tables
  - api_client: TestClient over the real SQL stack with clock and randomness overridden

DATABASE_URL is pointed at in-memory SQLite before any package import so the
module-level engine never touches a file on disk.
"""

import os
from datetime import datetime, timedelta
from types import SimpleNamespace
from typing import Optional

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("AUDIT_ENABLED", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from taobei_auth.application.errors import UserAlreadyExists
from taobei_auth.application.ports.code_repo import VerificationCodeDto
from taobei_auth.application.ports.session_repo import SessionDto
from taobei_auth.application.ports.user_repo import UserDto
from taobei_auth.application.services.auth_service import AuthService
from taobei_auth.application.services.code_store import CodeStore
from taobei_auth.application.services.session_store import SessionStore
from taobei_auth.database import get_session
from taobei_auth.db import models  # noqa: F401
from taobei_auth.dependencies import get_audit_logger, get_clock, get_random_source
from taobei_auth.main import app

START = datetime(2026, 1, 1, 12, 0, 0)
PHONE = "13800138000"


class FakeClock:
    def __init__(self, start: datetime = START):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current = self.current + timedelta(**kwargs)


class FakeRandomSource:
    """Hands out queued codes first, then repeats the default code."""

    def __init__(self, codes=None, default_code: str = "123456"):
        self.codes = list(codes or [])
        self.default_code = default_code
        self._tokens = 0

    def digits(self, length: int) -> str:
        if self.codes:
            return self.codes.pop(0)
        return self.default_code[:length].zfill(length)

    def token_hex(self, nbytes: int) -> str:
        self._tokens += 1
        return format(self._tokens, "x").zfill(nbytes * 2)


class RecordingSender:
    def __init__(self):
        self.sent = []

    def send(self, phone: str, code: str) -> None:
        self.sent.append((phone, code))


class RecordingAuditLogger:
    def __init__(self):
        self.entries = []

    def log(self, action, phone, user_id=None, request_id=None, ip_address=None, success=True, details=None):
        self.entries.append({
            "action": action,
            "phone": phone,
            "user_id": user_id,
            "request_id": request_id,
            "success": success,
            "details": details or {},
        })


class FakeUnitOfWork:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FakeUserRepo:
    def __init__(self):
        self.users = {}
        self._id = 0

    def get_by_phone(self, phone: str) -> Optional[UserDto]:
        return self.users.get(phone)

    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        for u in self.users.values():
            if u.id == user_id:
                return u
        return None

    def create(self, phone: str, created_at: datetime) -> UserDto:
        if phone in self.users:
            raise UserAlreadyExists()
        self._id += 1
        user = UserDto(id=f"user-{self._id}", phone=phone, created_at=created_at)
        self.users[phone] = user
        return user


class FakeCodeRepo:
    def __init__(self):
        self.records = []

    def append(self, phone, code, issued_at, expires_at) -> VerificationCodeDto:
        rec = VerificationCodeDto(len(self.records) + 1, phone, code, issued_at, expires_at)
        self.records.append(rec)
        return rec

    def latest_for_phone(self, phone) -> Optional[VerificationCodeDto]:
        matches = [r for r in self.records if r.phone == phone]
        return matches[-1] if matches else None


class FakeSessionRepo:
    def __init__(self):
        self.sessions = {}

    def create(self, user_id, token, issued_at, expires_at) -> SessionDto:
        rec = SessionDto(len(self.sessions) + 1, user_id, token, issued_at, expires_at)
        self.sessions[token] = rec
        return rec

    def get_by_token(self, token) -> Optional[SessionDto]:
        return self.sessions.get(token)


def build_auth(clock=None, random_source=None, user_repo=None):
    clock = clock or FakeClock()
    random_source = random_source or FakeRandomSource()
    sender = RecordingSender()
    users = user_repo or FakeUserRepo()
    code_repo = FakeCodeRepo()
    session_repo = FakeSessionRepo()
    uow = FakeUnitOfWork()
    service = AuthService(
        user_repo=users,
        codes=CodeStore(repo=code_repo, clock=clock, random_source=random_source, sender=sender),
        sessions=SessionStore(repo=session_repo, clock=clock, random_source=random_source),
        clock=clock,
        uow=uow,
    )
    return SimpleNamespace(
        service=service,
        clock=clock,
        random=random_source,
        sender=sender,
        users=users,
        code_repo=code_repo,
        session_repo=session_repo,
        uow=uow,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def auth(clock):
    return build_auth(clock=clock)


@pytest.fixture
def make_auth():
    return build_auth


@pytest.fixture
def fakes():
    return SimpleNamespace(
        Clock=FakeClock,
        RandomSource=FakeRandomSource,
        Sender=RecordingSender,
        UserRepo=FakeUserRepo,
        CodeRepo=FakeCodeRepo,
        SessionRepo=FakeSessionRepo,
        UnitOfWork=FakeUnitOfWork,
    )


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_session(sql_engine):
    with Session(sql_engine) as session:
        yield session


@pytest.fixture
def api_client(sql_engine):
    clock = FakeClock()
    random_source = FakeRandomSource()
    audit = RecordingAuditLogger()

    def _get_session():
        with Session(sql_engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_random_source] = lambda: random_source
    app.dependency_overrides[get_audit_logger] = lambda: audit
    with TestClient(app) as client:
        yield SimpleNamespace(client=client, clock=clock, random=random_source, audit=audit, engine=sql_engine)
    app.dependency_overrides.clear()
