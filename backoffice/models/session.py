"""직원 로그인 세션 모델 — 서버 측 세션 저장.

Employee session model — Server-side session storage for the back-office.
The browser only holds the opaque token (HttpOnly cookie); the session
attributes live in this table.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.database import Base
from backoffice.models.enums import EmployeeRole


class EmployeeSession(Base):
    """직원 세션 테이블.

    Employee session table. A session expires when it has not been used for
    ``max_inactive_seconds``.

    Attributes:
        id: 고유 식별자 (Primary key UUID)
        token: 세션 토큰 (Opaque session token stored in the cookie)
        employee_id: 로그인 직원 ID (Signed-in employee UUID)
        employee_account: 로그인 계정 (Employee account at sign-in)
        employee_name: 직원 이름 (Employee display name at sign-in)
        employee_role: 직원 역할 (Employee role at sign-in)
        store_id: 소속 매장 ID (Employee store at sign-in)
        login_time: 로그인 일시 (Sign-in timestamp)
        last_accessed_at: 마지막 접근 일시 (Last request timestamp)
        max_inactive_seconds: 비활성 만료 시간 (Inactivity timeout in seconds)
    """

    __tablename__ = "employee_sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    token: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    employee_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    employee_account: Mapped[str] = mapped_column(String(50), nullable=False)
    employee_name: Mapped[str] = mapped_column(String(50), nullable=False)
    employee_role: Mapped[EmployeeRole] = mapped_column(
        Enum(EmployeeRole, native_enum=False, length=30), nullable=False
    )
    store_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    login_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    last_accessed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    max_inactive_seconds: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    employee = relationship("Employee", back_populates="sessions")
