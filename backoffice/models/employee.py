"""직원 SQLAlchemy ORM 모델 정의.

Employee SQLAlchemy ORM model definition.
Holds back-office credentials and the login lockout counter.

Tables:
    - employees: 매장 직원 계정 (Store employee accounts)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.database import Base
from backoffice.models.enums import AccountStatus, EmployeeRole


class Employee(Base):
    """직원 모델 — 백오피스 로그인 계정.

    Employee model — Back-office sign-in account.
    ``login_failure_count`` counts consecutive wrong passwords; once it reaches
    the configured maximum the account status becomes INACTIVE (locked).

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        account: 로그인 계정 (Login account, globally unique)
        username: 직원 이름 (Display name)
        email: 이메일 (Email, globally unique, used for password reset)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        phone: 전화번호 (Phone, optional)
        role: 역할 (Employee role)
        status: 계정 상태 (Account status)
        login_failure_count: 연속 로그인 실패 횟수 (Consecutive failed sign-ins)
        last_login_at: 마지막 로그인 일시 (Last successful sign-in)
        store_id: 소속 매장 FK (Store foreign key)

    Relationships:
        store: 소속 매장 (Store the employee works at)
        sessions: 로그인 세션 목록 (Active back-office sessions, cascade delete)
    """

    __tablename__ = "employees"

    # 직원 고유 식별자 — Employee unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 로그인 계정 — Login account (전역 고유, globally unique)
    account: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    # 직원 이름 — Display name
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    # 이메일 — Email address (비밀번호 재설정 메일 수신, password reset target)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 전화번호 — Phone number (optional)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # 역할 — Employee role
    role: Mapped[EmployeeRole] = mapped_column(
        Enum(EmployeeRole, native_enum=False, length=30), nullable=False, default=EmployeeRole.STAFF
    )
    # 계정 상태 — Account status (INACTIVE = 정지 또는 잠금)
    status: Mapped[AccountStatus] = mapped_column(
        Enum(AccountStatus, native_enum=False, length=20), nullable=False, default=AccountStatus.ACTIVE
    )
    # 연속 로그인 실패 횟수 — Consecutive failed sign-ins (성공 시 0으로 초기화)
    login_failure_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 마지막 로그인 일시 — Last successful sign-in (UTC)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    # 소속 매장 FK — Store (매장 삭제 시 제한됨, store deletion is restricted)
    store_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("stores.id"), nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    store = relationship("Store", back_populates="employees")
    sessions = relationship("EmployeeSession", back_populates="employee", cascade="all, delete-orphan")
