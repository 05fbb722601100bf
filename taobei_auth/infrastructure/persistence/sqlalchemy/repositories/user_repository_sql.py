from typing import Optional
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import User
from .....application.errors import UserAlreadyExists
from .....application.ports.user_repo import UserRepository, UserDto
from ..errors import storage_call

class SqlUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, user: User) -> UserDto:
        return UserDto(id=user.id, phone=user.phone, created_at=user.created_at)

    def get_by_phone(self, phone: str) -> Optional[UserDto]:
        with storage_call(self.session, "user lookup by phone"):
            user = self.session.exec(select(User).where(User.phone == phone)).first()
        return self._to_dto(user) if user else None

    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        with storage_call(self.session, "user lookup by id"):
            user = self.session.get(User, user_id)
        return self._to_dto(user) if user else None

    def create(self, phone: str, created_at: datetime) -> UserDto:
        user = User(phone=phone, created_at=created_at)
        with storage_call(self.session, "user insert"):
            self.session.add(user)
            try:
                self.session.flush()
            except IntegrityError as e:
                # Unique constraint on phone
                self.session.rollback()
                raise UserAlreadyExists() from e
        return self._to_dto(user)
