"""세션 서비스 — 서버 측 직원 세션 관리.

Session Service — Server-side employee sessions. The browser only keeps an
opaque token; a session expires after ``max_inactive_seconds`` without a
request and every successful lookup slides that window forward.
"""

import logging
import secrets
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.models.employee import Employee
from backoffice.models.session import EmployeeSession
from backoffice.repositories.session_repository import session_repository
from backoffice.utils.clock import as_utc, utc_now

logger = logging.getLogger(__name__)


class SessionService:
    """직원 세션 생성, 조회, 만료 처리를 담당하는 서비스.

    Service creating, resolving and invalidating employee sessions.
    """

    def is_expired(self, db_session: EmployeeSession, now: datetime | None = None) -> bool:
        """마지막 접근 이후 비활성 시간이 초과되었는지 확인합니다.

        Whether the session has been idle longer than its inactivity timeout.
        """
        now = now or utc_now()
        idle: timedelta = now - as_utc(db_session.last_accessed_at)
        return idle > timedelta(seconds=db_session.max_inactive_seconds)

    async def create_session(
        self,
        db: AsyncSession,
        employee: Employee,
    ) -> EmployeeSession:
        """로그인한 직원의 세션을 생성합니다.

        Create a session holding the employee's id, account, name, role,
        store and login time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            employee: 인증된 직원 (Authenticated employee)

        Returns:
            EmployeeSession: 생성된 세션 (Created session with its token)
        """
        now: datetime = utc_now()
        return await session_repository.create(
            db,
            {
                "token": secrets.token_urlsafe(48),
                "employee_id": employee.id,
                "employee_account": employee.account,
                "employee_name": employee.username,
                "employee_role": employee.role,
                "store_id": employee.store_id,
                "login_time": now,
                "last_accessed_at": now,
                "max_inactive_seconds": settings.SESSION_MAX_INACTIVE_SECONDS,
            },
        )

    async def get_active_session(
        self,
        db: AsyncSession,
        token: str | None,
    ) -> EmployeeSession | None:
        """토큰으로 유효한 세션을 조회합니다.

        Resolve a live session. Unknown tokens yield None; idle sessions are
        deleted and yield None; live sessions get ``last_accessed_at = now``.
        """
        if not token:
            return None

        db_session: EmployeeSession | None = await session_repository.get_by_token(db, token)
        if db_session is None:
            return None

        now: datetime = utc_now()
        if self.is_expired(db_session, now):
            logger.info("Session of %s timed out", db_session.employee_account)
            await session_repository.delete_by_token(db, token)
            return None

        await session_repository.touch(db, db_session, now)
        return db_session

    async def invalidate(
        self,
        db: AsyncSession,
        token: str | None,
    ) -> EmployeeSession | None:
        """세션을 삭제합니다 (로그아웃).

        Delete the session and return it, or None when there was nothing
        to delete.
        """
        if not token:
            return None
        db_session: EmployeeSession | None = await session_repository.get_by_token(db, token)
        if db_session is None:
            return None
        await session_repository.delete_by_token(db, token)
        return db_session


# 싱글턴 인스턴스 — Singleton instance
session_service: SessionService = SessionService()
