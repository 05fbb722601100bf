import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Optional

from .application.errors import AuthError

logger = logging.getLogger(__name__)

def create_error_response(error_message: str, code: Optional[str] = None) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message,
        "code": code,
    }

async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """Translate a business-rule failure into its HTTP status and envelope"""
    if exc.http_status >= 500:
        logger.warning(f"{exc.kind.value} on {request.url.path}")
    return JSONResponse(
        status_code=exc.http_status,
        content=create_error_response(exc.message, exc.kind.value),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies get the same envelope as every other failure"""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.info(f"Rejected request body on {request.url.path}: {message}")
    return JSONResponse(
        status_code=422,
        content=create_error_response(message, "ValidationError"),
    )
