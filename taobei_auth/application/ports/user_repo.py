from typing import Protocol, Optional
from datetime import datetime


class UserDto:
    def __init__(self, id: str, phone: str, created_at: datetime):
        self.id = id
        self.phone = phone
        self.created_at = created_at

    def __eq__(self, other):
        if not isinstance(other, UserDto):
            return NotImplemented
        return self.id == other.id and self.phone == other.phone

    def __hash__(self):
        return hash((self.id, self.phone))

    def __repr__(self) -> str:
        return f"UserDto(id={self.id!r}, phone={self.phone!r})"


class UserRepository(Protocol):
    def get_by_phone(self, phone: str) -> Optional[UserDto]:
        ...

    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        ...

    def create(self, phone: str, created_at: datetime) -> UserDto:
        """Stage a user insert; raises UserAlreadyExists if the phone is taken."""
        ...
