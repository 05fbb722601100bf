# Models package (re-export feature modules for stable imports)
from .users.user import User
from .users.session import SessionToken
from .auth.verification_code import VerificationCode

__all__ = [
    "User",
    "SessionToken",
    "VerificationCode",
]
