"""직원 서비스 — 직원 목록 조회 및 비밀번호 재설정.

Employee Service — Employee helper lists for the login page and the
forgot-password flow (temporary password by email).
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.models.employee import Employee
from backoffice.models.enums import AccountStatus
from backoffice.repositories.employee_repository import employee_repository
from backoffice.repositories.session_repository import session_repository
from backoffice.schemas.employee import EmployeeDTO, ForgotPasswordResult
from backoffice.services.employee_auth_service import employee_auth_service
from backoffice.utils.email import send_password_reset_email
from backoffice.utils.exceptions import BadRequestError
from backoffice.utils.password import generate_random_password, hash_password

logger = logging.getLogger(__name__)


class EmployeeService:
    """직원 서비스.

    Employee service providing status lists and password reset.
    """

    async def find_all_active_employees(self, db: AsyncSession) -> list[EmployeeDTO]:
        """활성 직원 목록 (Active employees as DTOs)."""
        employees = await employee_repository.find_by_status(db, AccountStatus.ACTIVE)
        return [employee_auth_service.convert_to_dto(e) for e in employees]

    async def find_all_inactive_employees(self, db: AsyncSession) -> list[EmployeeDTO]:
        """비활성(잠금 포함) 직원 목록 (Inactive or locked employees as DTOs)."""
        employees = await employee_repository.find_by_status(db, AccountStatus.INACTIVE)
        return [employee_auth_service.convert_to_dto(e) for e in employees]

    async def process_forgot_password(
        self,
        db: AsyncSession,
        account_or_email: str,
    ) -> ForgotPasswordResult:
        """비밀번호 재설정을 처리합니다.

        Reset the password of the employee matching ``account_or_email``:
        generate a random password, store its hash, clear the failure
        counter, drop existing sessions and email the new password.
        The caller commits on success and rolls back on failure.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            account_or_email: 계정 또는 이메일 (Account or email)

        Returns:
            ForgotPasswordResult: 처리 결과 (Outcome message and success flag)

        Raises:
            BadRequestError: 입력이 비어 있을 때 (Blank input)
        """
        value: str = (account_or_email or "").strip()
        if not value:
            raise BadRequestError("Please enter your account or email")

        employee: Employee | None = await employee_repository.get_by_account_or_email(db, value)
        if employee is None:
            logger.info("Forgot-password request for unknown account/email %s", value)
            return ForgotPasswordResult(
                success=False,
                message="No employee found with that account or email",
            )

        if employee.status != AccountStatus.ACTIVE:
            logger.info("Forgot-password refused for inactive account %s", employee.account)
            return ForgotPasswordResult(
                success=False,
                message="This account is disabled. Please contact the system administrator.",
            )

        new_password: str = generate_random_password(settings.RESET_PASSWORD_LENGTH)
        await employee_repository.set_login_failure_count(
            db, employee.id, 0, password_hash=hash_password(new_password)
        )
        await session_repository.delete_by_employee(db, employee.id)

        try:
            await send_password_reset_email(employee.email, employee.username, new_password)
        except Exception:
            logger.exception("Failed to send password reset email to %s", employee.email)
            return ForgotPasswordResult(
                success=False,
                message="We could not send the email right now. Please try again later.",
            )

        logger.info("Password reset for account %s", employee.account)
        return ForgotPasswordResult(
            success=True,
            message="A new password has been sent to your registered email address",
        )


# 싱글턴 인스턴스 — Singleton instance
employee_service: EmployeeService = EmployeeService()
