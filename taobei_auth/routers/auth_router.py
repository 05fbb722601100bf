# taobei_auth/routers/auth_router.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request

from ..application.errors import AuthError
from ..application.ports.audit_logger import AuditLogger
from ..application.ports.user_repo import UserDto
from ..application.services.auth_service import AuthResult, AuthService
from ..dependencies import get_audit_logger, get_auth_service
from ..schemas import (
    AuthData,
    AuthResponse,
    CodeSentData,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    RequestCodeRequest,
    RequestCodeResponse,
    SessionData,
    UserResponse,
    VerifyTokenRequest,
    VerifyTokenResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def _client_info(request: Request) -> Dict[str, Optional[str]]:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "ip_address": request.client.host if request.client else None,
    }


def _audit(audit: AuditLogger, request: Request, action: str, phone: str,
           user_id: Optional[str] = None, error: Optional[AuthError] = None,
           details: Optional[Dict[str, Any]] = None) -> None:
    details = dict(details or {})
    if error is not None:
        details["error"] = error.kind.value
    audit.log(
        action,
        phone,
        user_id=user_id,
        success=error is None,
        details=details,
        **_client_info(request),
    )


def _user(user: UserDto) -> UserResponse:
    return UserResponse(id=str(user.id), phone=user.phone)


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        message=result.message,
        data=AuthData(user=_user(result.user), token=result.token),
    )


@router.post("/request-code", response_model=RequestCodeResponse, responses=_ERROR_RESPONSES)
def request_code(
    payload: RequestCodeRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
    audit: AuditLogger = Depends(get_audit_logger),
):
    try:
        result = service.request_code(payload.phone, login_intent=payload.login_intent)
    except AuthError as e:
        _audit(audit, request, "request_code", payload.phone, error=e)
        raise
    _audit(audit, request, "request_code", payload.phone, details={"login_intent": payload.login_intent})
    return RequestCodeResponse(message=result.message, data=CodeSentData(seconds=result.seconds_valid))


@router.post("/register", response_model=AuthResponse, responses=_ERROR_RESPONSES)
def register(
    payload: RegisterRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
    audit: AuditLogger = Depends(get_audit_logger),
):
    try:
        result = service.register(
            payload.phone, payload.code, agree=payload.agree, remember_me=payload.remember_me
        )
    except AuthError as e:
        _audit(audit, request, "register", payload.phone, error=e)
        raise
    _audit(
        audit, request, "register", payload.phone,
        user_id=result.user.id,
        details={"created": result.created, "session_issued": result.session is not None},
    )
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse, responses=_ERROR_RESPONSES)
def login(
    payload: LoginRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
    audit: AuditLogger = Depends(get_audit_logger),
):
    try:
        result = service.login(
            payload.phone,
            code=payload.code,
            password=payload.password,
            login_mode=payload.login_mode,
            remember_me=payload.remember_me,
        )
    except AuthError as e:
        _audit(audit, request, "login", payload.phone, error=e, details={"mode": payload.login_mode.value})
        raise
    _audit(
        audit, request, "login", payload.phone,
        user_id=result.user.id,
        details={"mode": payload.login_mode.value, "session_issued": result.session is not None},
    )
    return _auth_response(result)


@router.post("/verify-token", response_model=VerifyTokenResponse, responses=_ERROR_RESPONSES)
def verify_token(
    payload: VerifyTokenRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
    audit: AuditLogger = Depends(get_audit_logger),
):
    # The token itself never reaches the audit trail
    try:
        result = service.verify_session(payload.token)
    except AuthError as e:
        _audit(audit, request, "verify_token", "", error=e)
        raise
    _audit(audit, request, "verify_token", result.user.phone, user_id=result.user.id)
    return VerifyTokenResponse(message=result.message, data=SessionData(user=_user(result.user)))
