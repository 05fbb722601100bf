from dataclasses import dataclass
from enum import Enum
from contextlib import contextmanager
from typing import Optional
import logging

from ..errors import (
    AgreementRequired,
    CodeExpired,
    CodeMismatch,
    InvalidPhone,
    NoCodeIssued,
    NotRegistered,
    PasswordNotSupported,
    TokenExpired,
    TokenInvalid,
    TokenMissing,
    UserAlreadyExists,
    UserNotFound,
)
from ..phone import is_valid_phone, normalize_phone
from ..ports.clock import Clock
from ..ports.session_repo import SessionDto
from ..ports.unit_of_work import UnitOfWork
from ..ports.user_repo import UserRepository, UserDto
from .code_store import CodeStore
from .session_store import SessionStore

logger = logging.getLogger(__name__)

MSG_CODE_SENT = "Verification code sent"
MSG_REGISTERED = "Registration successful"
MSG_ALREADY_REGISTERED = "This phone number is already registered, logging you in"
MSG_LOGGED_IN = "Login successful"
MSG_TOKEN_VERIFIED = "Token verified"


class LoginMode(str, Enum):
    CODE = "code"
    PASSWORD = "password"


@dataclass
class CodeRequestResult:
    message: str
    seconds_valid: int


@dataclass
class AuthResult:
    message: str
    user: UserDto
    session: Optional[SessionDto] = None
    created: bool = False

    @property
    def token(self) -> Optional[str]:
        return self.session.token if self.session else None


@dataclass
class SessionCheckResult:
    message: str
    user: UserDto


@dataclass
class AuthService:
    """Verification-code and session lifecycle for phone-number accounts.

    Each operation is a self-contained transaction against the stores and
    either returns a result or raises an AuthError subclass. Writes made by
    a failed operation are rolled back together.
    """

    user_repo: UserRepository
    codes: CodeStore
    sessions: SessionStore
    clock: Clock
    uow: UnitOfWork

    def request_code(self, phone: str, login_intent: bool = False) -> CodeRequestResult:
        phone = self._require_phone(phone)
        if login_intent and self.user_repo.get_by_phone(phone) is None:
            raise NotRegistered()
        with self._transaction():
            self.codes.issue(phone)
        return CodeRequestResult(message=MSG_CODE_SENT, seconds_valid=self.codes.ttl_seconds)

    def register(self, phone: str, code: Optional[str], agree: bool, remember_me: bool = False) -> AuthResult:
        phone = self._require_phone(phone)
        if not agree:
            raise AgreementRequired()
        self._check_code(phone, code)

        with self._transaction():
            existing = self.user_repo.get_by_phone(phone)
            if existing is not None:
                return self._merge_to_login(existing, remember_me)

            try:
                user = self.user_repo.create(phone, created_at=self.clock.now())
            except UserAlreadyExists:
                # Lost the race against a concurrent registration for this phone.
                existing = self.user_repo.get_by_phone(phone)
                if existing is None:
                    raise
                return self._merge_to_login(existing, remember_me)

            result = AuthResult(
                message=MSG_REGISTERED,
                user=user,
                session=self._maybe_issue_session(user, remember_me),
                created=True,
            )
        logger.info("Registered user %s", user.id)
        return result

    def login(self, phone: str, code: Optional[str] = None, password: Optional[str] = None,
              login_mode: LoginMode = LoginMode.CODE, remember_me: bool = False) -> AuthResult:
        phone = self._require_phone(phone)
        user = self.user_repo.get_by_phone(phone)
        if user is None:
            raise NotRegistered()
        if LoginMode(login_mode) is LoginMode.PASSWORD:
            raise PasswordNotSupported()
        self._check_code(phone, code)
        with self._transaction():
            session = self._maybe_issue_session(user, remember_me)
        return AuthResult(message=MSG_LOGGED_IN, user=user, session=session)

    def verify_session(self, token: Optional[str]) -> SessionCheckResult:
        if not token:
            raise TokenMissing()
        session = self.sessions.resolve(token)
        if session is None:
            raise TokenInvalid()
        if self.clock.now() >= session.expires_at:
            raise TokenExpired()
        user = self.user_repo.get_by_id(session.user_id)
        if user is None:
            raise UserNotFound()
        return SessionCheckResult(message=MSG_TOKEN_VERIFIED, user=user)

    @contextmanager
    def _transaction(self):
        try:
            yield
        except Exception:
            self.uow.rollback()
            raise
        self.uow.commit()

    def _require_phone(self, phone: Optional[str]) -> str:
        if not is_valid_phone(phone):
            raise InvalidPhone()
        return normalize_phone(phone)

    def _check_code(self, phone: str, code: Optional[str]) -> None:
        # Codes are not consumed on success: the latest one stays usable until it expires.
        record = self.codes.most_recent(phone)
        if record is None:
            raise NoCodeIssued()
        if record.expires_at < self.clock.now():
            raise CodeExpired()
        if code is None or str(code) != record.code:
            raise CodeMismatch()

    def _merge_to_login(self, user: UserDto, remember_me: bool) -> AuthResult:
        return AuthResult(
            message=MSG_ALREADY_REGISTERED,
            user=user,
            session=self._maybe_issue_session(user, remember_me),
        )

    def _maybe_issue_session(self, user: UserDto, remember_me: bool) -> Optional[SessionDto]:
        if not remember_me:
            return None
        return self.sessions.issue(user.id)
