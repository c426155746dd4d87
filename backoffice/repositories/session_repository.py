"""세션 레포지토리 — 직원 로그인 세션 CRUD.

Session Repository — Handles employee session CRUD for the
cookie-based back-office sign-in.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.session import EmployeeSession


class EmployeeSessionRepository:
    """세션 관련 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling employee session queries.
    """

    async def create(
        self,
        db: AsyncSession,
        session_data: dict,
    ) -> EmployeeSession:
        """새 세션을 생성합니다 (Create a new session record)."""
        db_session: EmployeeSession = EmployeeSession(**session_data)
        db.add(db_session)
        await db.flush()
        await db.refresh(db_session)
        return db_session

    async def get_by_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> EmployeeSession | None:
        """세션 토큰으로 세션을 조회합니다.

        Retrieve a session by its cookie token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            token: 세션 토큰 (Opaque session token)

        Returns:
            EmployeeSession | None: 조회된 세션 또는 None (Found session or None)
        """
        query: Select = select(EmployeeSession).where(EmployeeSession.token == token)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def touch(
        self,
        db: AsyncSession,
        db_session: EmployeeSession,
        accessed_at: datetime,
    ) -> None:
        """마지막 접근 일시를 갱신합니다 (Slide the inactivity window)."""
        db_session.last_accessed_at = accessed_at
        await db.flush()

    async def delete_by_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> bool:
        """세션을 삭제합니다.

        Delete a session by token.

        Returns:
            bool: 삭제 성공 여부 (Whether a session was deleted)
        """
        db_session: EmployeeSession | None = await self.get_by_token(db, token)
        if db_session is None:
            return False

        await db.delete(db_session)
        await db.flush()
        return True

    async def delete_by_employee(
        self,
        db: AsyncSession,
        employee_id: UUID,
    ) -> None:
        """특정 직원의 모든 세션을 삭제합니다.

        Delete every session of an employee (e.g. after a password reset).
        """
        stmt = delete(EmployeeSession).where(EmployeeSession.employee_id == employee_id)
        await db.execute(stmt)
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
session_repository: EmployeeSessionRepository = EmployeeSessionRepository()
