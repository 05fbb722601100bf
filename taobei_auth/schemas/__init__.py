# Schemas package (re-export feature modules for stable imports)
from .auth import (
    RequestCodeRequest, RegisterRequest, LoginRequest, VerifyTokenRequest,
    UserResponse, CodeSentData, AuthData, SessionData,
    RequestCodeResponse, AuthResponse, VerifyTokenResponse,
)
from .common import ErrorResponse, HealthResponse

__all__ = [
    "RequestCodeRequest",
    "RegisterRequest",
    "LoginRequest",
    "VerifyTokenRequest",
    "UserResponse",
    "CodeSentData",
    "AuthData",
    "SessionData",
    "RequestCodeResponse",
    "AuthResponse",
    "VerifyTokenResponse",
    "ErrorResponse",
    "HealthResponse",
]
