"""직원 레포지토리 — 직원 계정 조회 및 로그인 실패 카운터 갱신.

Employee Repository — Account lookups and the login failure counter.
Counter and status changes are issued as single UPDATE statements (the
identity map is synchronized) so concurrent requests cannot lose increments.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backoffice.models.employee import Employee
from backoffice.models.enums import AccountStatus
from backoffice.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """직원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the employees table.
    """

    def __init__(self) -> None:
        super().__init__(Employee)

    async def get_by_account(
        self,
        db: AsyncSession,
        account: str,
    ) -> Employee | None:
        """로그인 계정으로 직원을 조회합니다 (매장 함께 로드).

        Retrieve an employee by login account, with the store eager-loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            account: 로그인 계정 (Login account)

        Returns:
            Employee | None: 조회된 직원 또는 None (Found employee or None)
        """
        query: Select = (
            select(Employee)
            .options(selectinload(Employee.store))
            .where(Employee.account == account)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_account_or_email(
        self,
        db: AsyncSession,
        account_or_email: str,
    ) -> Employee | None:
        """계정 또는 이메일로 직원을 조회합니다 (비밀번호 재설정용).

        Retrieve an employee whose account or email equals the given value.
        Accounts take precedence when both match different rows.
        """
        query: Select = select(Employee).where(
            or_(Employee.account == account_or_email, Employee.email == account_or_email)
        )
        result = await db.execute(query)
        employees: list[Employee] = list(result.scalars().all())
        if not employees:
            return None
        for employee in employees:
            if employee.account == account_or_email:
                return employee
        return employees[0]

    async def find_by_status(
        self,
        db: AsyncSession,
        status: AccountStatus,
    ) -> Sequence[Employee]:
        """계정 상태로 직원 목록을 조회합니다 (Employees with the given status, by account)."""
        query: Select = (
            select(Employee)
            .options(selectinload(Employee.store))
            .where(Employee.status == status)
            .order_by(Employee.account)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def increment_login_failure_count(
        self,
        db: AsyncSession,
        employee_id: UUID,
    ) -> int:
        """로그인 실패 횟수를 1 증가시키고 새 값을 반환합니다.

        Atomically increment the failure counter and return the new value.

        Returns:
            int: 증가 후 실패 횟수 (Failure count after the increment)
        """
        await db.execute(
            update(Employee)
            .where(Employee.id == employee_id)
            .values(login_failure_count=Employee.login_failure_count + 1)
        )
        await db.flush()
        result = await db.execute(
            select(Employee.login_failure_count).where(Employee.id == employee_id)
        )
        return result.scalar_one()

    async def set_login_failure_count(
        self,
        db: AsyncSession,
        employee_id: UUID,
        count: int,
        **extra_values: object,
    ) -> None:
        """로그인 실패 횟수를 지정 값으로 설정합니다 (Set the failure counter)."""
        await db.execute(
            update(Employee)
            .where(Employee.id == employee_id)
            .values(login_failure_count=count, **extra_values)
        )
        await db.flush()

    async def set_status(
        self,
        db: AsyncSession,
        employee_id: UUID,
        status: AccountStatus,
    ) -> None:
        """계정 상태를 변경합니다 (Change the account status)."""
        await db.execute(
            update(Employee)
            .where(Employee.id == employee_id)
            .values(status=status)
        )
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
employee_repository: EmployeeRepository = EmployeeRepository()
