"""커스텀 예외 클래스 모듈.

Custom exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns,
and the login business exceptions that the login view maps to flash messages.

Usage:
    from backoffice.utils.exceptions import NotFoundError, AccountLockedError
    raise NotFoundError("Announcement not found")
    raise AccountLockedError()
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (announcement, store, employee, etc.) does not exist.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that violates a uniqueness constraint
    (e.g. duplicate employee account or email).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 권한 부족 시 사용.

    403 Forbidden exception.
    Raised when the logged-in employee's role is not allowed to perform the operation.
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when the session cookie is missing, unknown, or timed out.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. announcement end time before start time on a partial update).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


# === 로그인 비즈니스 예외 (Login business exceptions) ===

class LoginError(Exception):
    """로그인 실패 예외의 부모 클래스.

    Base class for login failures. ``message`` is the user-facing text
    shown on the login page.
    """

    default_message: str = "Invalid account or password"

    def __init__(self, message: str | None = None) -> None:
        self.message: str = message or self.default_message
        super().__init__(self.message)


class InvalidCredentialsError(LoginError):
    """계정 없음 또는 비밀번호 불일치.

    Unknown account or wrong password. ``remaining_attempts`` is set only when
    the account exists and the failure counter was incremented.
    """

    def __init__(
        self,
        message: str | None = None,
        remaining_attempts: int | None = None,
        max_attempts: int | None = None,
    ) -> None:
        super().__init__(message)
        self.remaining_attempts: int | None = remaining_attempts
        self.max_attempts: int | None = max_attempts


class AccountLockedError(LoginError):
    """로그인 실패 횟수 초과로 잠긴 계정."""

    default_message = (
        "Your account has been disabled after too many failed sign-in attempts. "
        "Please contact the system administrator to unlock it."
    )


class AccountDisabledError(LoginError):
    """관리자에 의해 비활성화된 계정."""

    default_message = "Your account has been disabled. Please contact the system administrator."
