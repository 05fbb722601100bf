# taobei_auth/schemas/auth.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional

from ..application.services.auth_service import LoginMode


class _Request(BaseModel):
    # Unknown fields are rejected here so the engine only ever sees known shapes
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class RequestCodeRequest(_Request):
    phone: str = Field("", description="11-digit mainland China mobile number")
    login_intent: bool = Field(False, alias="loginIntent", description="Only issue the code if the phone is registered")


class RegisterRequest(_Request):
    phone: str = Field("", description="11-digit mainland China mobile number")
    code: str = Field(..., description="Verification code received for the phone")
    agree: bool = Field(False, description="User agreement accepted")
    remember_me: bool = Field(False, alias="rememberMe", description="Issue a 7-day session token")


class LoginRequest(_Request):
    phone: str = Field("", description="11-digit mainland China mobile number")
    code: Optional[str] = Field(None, description="Verification code (code login)")
    password: Optional[str] = Field(None, description="Password (password login)")
    login_mode: LoginMode = Field(LoginMode.CODE, alias="loginMode")
    remember_me: bool = Field(False, alias="rememberMe", description="Issue a 7-day session token")

    @model_validator(mode="after")
    def check_mode_fields(self):
        if self.login_mode is LoginMode.CODE:
            if self.code is None:
                raise ValueError("code is required for code login")
            if self.password is not None:
                raise ValueError("password is not accepted for code login")
        else:
            if self.password is None:
                raise ValueError("password is required for password login")
            if self.code is not None:
                raise ValueError("code is not accepted for password login")
        return self


class VerifyTokenRequest(_Request):
    token: Optional[str] = Field(None, description="Session token previously issued by login or register")


class UserResponse(BaseModel):
    id: str
    phone: str


class CodeSentData(BaseModel):
    seconds: int


class AuthData(BaseModel):
    user: UserResponse
    token: Optional[str] = None


class SessionData(BaseModel):
    user: UserResponse


class RequestCodeResponse(BaseModel):
    success: bool = True
    message: str
    data: CodeSentData


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    data: AuthData


class VerifyTokenResponse(BaseModel):
    success: bool = True
    message: str
    data: SessionData
