"""FastAPI 의존성 주입 모듈 — 세션 인증 및 역할 검사.

FastAPI dependency injection module — Session authentication and roles.

Authentication Flow:
    1. 브라우저가 세션 쿠키를 전송 (Browser sends the session cookie)
    2. session_service가 토큰으로 세션을 조회하고 비활성 시간을 검사
       (session_service resolves the token and checks inactivity)
    3. 만료/미존재 시 401, 유효하면 마지막 접근 일시를 갱신
       (401 when missing or timed out; otherwise last access slides to now)
"""

from typing import Annotated, Awaitable, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.database import get_db
from backoffice.models.enums import EmployeeRole
from backoffice.models.session import EmployeeSession
from backoffice.services.session_service import session_service
from backoffice.utils.exceptions import ForbiddenError, UnauthorizedError


async def get_current_session(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeSession:
    """세션 쿠키에서 현재 로그인 세션을 가져옵니다.

    Resolve the signed-in employee session from the session cookie.

    Args:
        request: 현재 요청 (Current request, for the cookie)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        EmployeeSession: 유효한 로그인 세션 (Live employee session)

    Raises:
        UnauthorizedError: 쿠키 없음, 알 수 없는 토큰 또는 시간 초과
                           (Missing cookie, unknown token or timed out)
    """
    token: str | None = request.cookies.get(settings.SESSION_COOKIE_NAME)
    current: EmployeeSession | None = await session_service.get_active_session(db, token)
    # 접근 일시 갱신 또는 만료 세션 삭제를 확정 — Persist the touch or the timeout delete
    await db.commit()
    if current is None:
        raise UnauthorizedError("Session expired or not signed in")
    return current


def require_role(*roles: EmployeeRole) -> Callable[..., Awaitable[EmployeeSession]]:
    """역할 기반 권한 검사 의존성 팩토리.

    Dependency factory allowing only the given employee roles.

    Returns:
        FastAPI 의존성 함수 — 세션 반환 또는 403 발생
        (Dependency returning the session or raising 403)
    """
    async def _check(
        current: Annotated[EmployeeSession, Depends(get_current_session)],
    ) -> EmployeeSession:
        if current.employee_role not in roles:
            raise ForbiddenError()
        return current
    return _check


# 편의 의존성 — Pre-configured role dependency
require_headquarters_admin = require_role(EmployeeRole.HEADQUARTERS_ADMIN)
