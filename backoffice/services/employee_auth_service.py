"""직원 인증 서비스 — 로그인, 실패 횟수 관리, 계정 잠금.

Employee Auth Service — Sign-in flow with the consecutive-failure counter.
After ``MAX_LOGIN_ATTEMPTS`` wrong passwords the account is set INACTIVE
and only an administrator can unlock it.
"""

import logging
import secrets
from uuid import UUID

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.models.employee import Employee
from backoffice.models.enums import AccountStatus
from backoffice.repositories.employee_repository import employee_repository
from backoffice.schemas.employee import EmployeeDTO
from backoffice.utils.clock import utc_now
from backoffice.utils.exceptions import (
    AccountDisabledError,
    AccountLockedError,
    InvalidCredentialsError,
    NotFoundError,
)
from backoffice.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)

# 없는 계정도 같은 bcrypt 비용을 치르도록 하는 비교용 해시
# Hash compared against for unknown accounts so they cost one bcrypt check too
_DUMMY_PASSWORD_HASH: str = hash_password(secrets.token_urlsafe(16))


class EmployeeAuthService:
    """직원 로그인 비즈니스 로직을 처리하는 서비스.

    Service handling employee sign-in, lockout and unlock.

    Attributes:
        max_attempts: 잠금 전 허용 실패 횟수 (Failures allowed before lockout)
    """

    def __init__(self, max_attempts: int | None = None) -> None:
        self.max_attempts: int = max_attempts or settings.MAX_LOGIN_ATTEMPTS

    async def find_employee_by_account(
        self,
        db: AsyncSession,
        account: str,
    ) -> Employee | None:
        """계정으로 직원을 조회합니다 (Look up an employee by account)."""
        return await employee_repository.get_by_account(db, account)

    def validate_password(self, raw_password: str, password_hash: str) -> bool:
        """비밀번호를 bcrypt 해시와 비교합니다 (Check a password against its hash)."""
        return verify_password(raw_password, password_hash)

    async def increment_login_failure_count(
        self,
        db: AsyncSession,
        employee_id: UUID,
    ) -> int:
        """로그인 실패 횟수를 1 증가시킵니다.

        Increment the failure counter and return the new value.
        """
        count: int = await employee_repository.increment_login_failure_count(db, employee_id)
        logger.info("Login failure count for employee %s is now %d", employee_id, count)
        return count

    async def lock_account(
        self,
        db: AsyncSession,
        employee_id: UUID,
    ) -> None:
        """계정을 잠급니다 (Set the account INACTIVE)."""
        await employee_repository.set_status(db, employee_id, AccountStatus.INACTIVE)
        logger.warning("Employee %s locked after %d failed sign-ins", employee_id, self.max_attempts)

    async def reset_login_failure_count(
        self,
        db: AsyncSession,
        employee_id: UUID,
    ) -> None:
        """로그인 성공 시 실패 횟수를 0으로 초기화하고 로그인 일시를 기록합니다.

        Reset the failure counter and stamp ``last_login_at``.
        """
        await employee_repository.set_login_failure_count(
            db, employee_id, 0, last_login_at=utc_now()
        )

    async def unlock_account(
        self,
        db: AsyncSession,
        employee_id: UUID,
    ) -> Employee:
        """잠긴 계정을 해제합니다 (관리자 전용).

        Reactivate an account and clear its failure counter.

        Raises:
            NotFoundError: 직원이 없을 때 (When the employee does not exist)
        """
        employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")

        await employee_repository.set_status(db, employee_id, AccountStatus.ACTIVE)
        await employee_repository.set_login_failure_count(db, employee_id, 0)
        await db.refresh(employee)
        logger.info("Employee %s (%s) unlocked", employee.account, employee_id)
        return employee

    def convert_to_dto(self, employee: Employee) -> EmployeeDTO:
        """직원 모델을 DTO로 변환합니다 (비밀번호 해시 제외).

        Convert an employee to its DTO. ``store_name`` is filled only when
        the store relationship is already loaded.
        """
        store = None if "store" in inspect(employee).unloaded else employee.store
        return EmployeeDTO(
            employee_id=str(employee.id),
            account=employee.account,
            username=employee.username,
            email=employee.email,
            phone=employee.phone,
            role=employee.role,
            status=employee.status,
            store_id=str(employee.store_id),
            store_name=store.name if store is not None else None,
            login_failure_count=employee.login_failure_count,
            last_login_at=employee.last_login_at,
        )

    async def authenticate(
        self,
        db: AsyncSession,
        account: str,
        password: str,
    ) -> Employee:
        """직원 로그인을 처리합니다.

        Process an employee sign-in.

        1. 계정 없음 → InvalidCredentialsError (no counter)
        2. 비활성 계정 → AccountLockedError (count >= max) or AccountDisabledError
        3. 비밀번호 불일치 → 실패 횟수 증가, max 도달 시 잠금
        4. 성공 → 실패 횟수 초기화

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            account: 로그인 계정 (Login account)
            password: 평문 비밀번호 (Plain text password)

        Returns:
            Employee: 인증된 직원 (Authenticated employee)

        Raises:
            InvalidCredentialsError: 계정 없음 또는 비밀번호 불일치
                                     (Unknown account or wrong password)
            AccountLockedError: 실패 횟수 초과로 잠긴 계정 (Locked account)
            AccountDisabledError: 비활성화된 계정 (Disabled account)
        """
        logger.info("Sign-in attempt for account %s", account)

        employee: Employee | None = await self.find_employee_by_account(db, account)
        if employee is None:
            self.validate_password(password, _DUMMY_PASSWORD_HASH)
            logger.info("Sign-in failed: unknown account %s", account)
            raise InvalidCredentialsError()

        if employee.status == AccountStatus.INACTIVE:
            logger.info("Sign-in refused: account %s is inactive", account)
            if employee.login_failure_count >= self.max_attempts:
                raise AccountLockedError()
            raise AccountDisabledError()

        if not self.validate_password(password, employee.password_hash):
            count: int = await self.increment_login_failure_count(db, employee.id)
            if count >= self.max_attempts:
                await self.lock_account(db, employee.id)
                raise AccountLockedError()
            remaining: int = self.max_attempts - count
            raise InvalidCredentialsError(
                f"Invalid account or password. {remaining} attempt(s) remaining "
                f"before your account is disabled.",
                remaining_attempts=remaining,
                max_attempts=self.max_attempts,
            )

        await self.reset_login_failure_count(db, employee.id)
        logger.info("Sign-in succeeded for account %s", account)
        return employee


# 싱글턴 인스턴스 — Singleton instance
employee_auth_service: EmployeeAuthService = EmployeeAuthService()
