from enum import Enum


class AuthErrorKind(str, Enum):
    INVALID_PHONE = "InvalidPhone"
    AGREEMENT_REQUIRED = "AgreementRequired"
    NOT_REGISTERED = "NotRegistered"
    PASSWORD_NOT_SUPPORTED = "PasswordNotSupported"
    NO_CODE_ISSUED = "NoCodeIssued"
    CODE_EXPIRED = "CodeExpired"
    CODE_MISMATCH = "CodeMismatch"
    TOKEN_MISSING = "TokenMissing"
    TOKEN_INVALID = "TokenInvalid"
    TOKEN_EXPIRED = "TokenExpired"
    USER_NOT_FOUND = "UserNotFound"
    USER_ALREADY_EXISTS = "UserAlreadyExists"
    STORAGE_UNAVAILABLE = "StorageUnavailable"


class AuthError(Exception):
    """Terminal business-rule failure for a single request.

    Subclasses fix the kind, the human-readable message and the HTTP status
    the router reports it with.
    """

    kind: AuthErrorKind
    message: str = "Authentication failed"
    http_status: int = 400

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidPhone(AuthError):
    kind = AuthErrorKind.INVALID_PHONE
    message = "Please enter a valid mobile phone number"


class AgreementRequired(AuthError):
    kind = AuthErrorKind.AGREEMENT_REQUIRED
    message = "Please accept the Taobei user agreement first"


class NotRegistered(AuthError):
    kind = AuthErrorKind.NOT_REGISTERED
    message = "This phone number is not registered, please register first"


class PasswordNotSupported(AuthError):
    kind = AuthErrorKind.PASSWORD_NOT_SUPPORTED
    message = "Password login is not supported yet, please use a verification code"


class NoCodeIssued(AuthError):
    kind = AuthErrorKind.NO_CODE_ISSUED
    message = "Please request a verification code first"


class CodeExpired(AuthError):
    kind = AuthErrorKind.CODE_EXPIRED
    message = "Verification code has expired"


class CodeMismatch(AuthError):
    kind = AuthErrorKind.CODE_MISMATCH
    message = "Verification code is incorrect"


class TokenMissing(AuthError):
    kind = AuthErrorKind.TOKEN_MISSING
    message = "Token is required"


class TokenInvalid(AuthError):
    kind = AuthErrorKind.TOKEN_INVALID
    message = "Token is invalid"
    http_status = 401


class TokenExpired(AuthError):
    kind = AuthErrorKind.TOKEN_EXPIRED
    message = "Token has expired"
    http_status = 401


class UserNotFound(AuthError):
    kind = AuthErrorKind.USER_NOT_FOUND
    message = "User does not exist"
    http_status = 401


class UserAlreadyExists(AuthError):
    # Raised by UserRepository.create; AuthService turns it into the login path.
    kind = AuthErrorKind.USER_ALREADY_EXISTS
    message = "This phone number is already registered"
    http_status = 409


class StorageUnavailable(AuthError):
    """The backing store failed or timed out.

    Reads are safe to retry. A write may have landed before the failure was
    observed, so callers should re-check state before retrying one.
    """

    kind = AuthErrorKind.STORAGE_UNAVAILABLE
    message = "Service temporarily unavailable, please try again later"
    http_status = 503
