"""직원 인증 관련 Pydantic 요청/응답 스키마 정의.

Employee authentication Pydantic request/response schema definitions.
Covers the login form, the forgot-password form, and the employee DTO
stored in the session and shown on the login page helper lists.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from backoffice.models.enums import AccountStatus, EmployeeRole


class EmployeeLoginRequest(BaseModel):
    """직원 로그인 폼 스키마.

    Employee login form schema. Validation errors are rendered back on the
    login page instead of returning 422.

    Attributes:
        account: 로그인 계정 (Login account, max 50 chars)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    account: str = Field(default="", max_length=50)
    password: str = ""

    @field_validator("account")
    @classmethod
    def account_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter your account")
        return value

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter your password")
        return value


class ForgotPasswordRequest(BaseModel):
    """비밀번호 재설정 폼 스키마.

    Forgot-password form schema.

    Attributes:
        account_or_email: 계정 또는 이메일 (Account or email of the employee)
    """

    account_or_email: str = Field(default="", max_length=100)

    @field_validator("account_or_email")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter your account or email")
        return value


class ForgotPasswordResult(BaseModel):
    """비밀번호 재설정 처리 결과 (Forgot-password outcome shown on the page)."""

    success: bool
    message: str


class EmployeeDTO(BaseModel):
    """직원 DTO — 세션/화면 표시용 직원 정보 (비밀번호 제외).

    Employee data transfer object without credentials.

    Attributes:
        employee_id: 직원 UUID 문자열 (Employee UUID as string)
        account: 로그인 계정 (Login account)
        username: 직원 이름 (Display name)
        email: 이메일 (Email)
        phone: 전화번호 (Phone, optional)
        role: 역할 (Role)
        status: 계정 상태 (Account status)
        store_id: 소속 매장 UUID 문자열 (Store UUID as string)
        store_name: 소속 매장 이름 (Store name, when loaded)
        login_failure_count: 연속 로그인 실패 횟수 (Consecutive failed sign-ins)
        last_login_at: 마지막 로그인 일시 (Last sign-in)
    """

    employee_id: str
    account: str
    username: str
    email: str
    phone: str | None = None
    role: EmployeeRole
    status: AccountStatus
    store_id: str
    store_name: str | None = None
    login_failure_count: int = 0
    last_login_at: datetime | None = None
