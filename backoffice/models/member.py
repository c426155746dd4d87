"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.
Members are the chain's customers; feedback and orders reference them.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.database import Base


class Member(Base):
    """회원 모델 — 고객 계정.

    Member model — Customer account referenced by feedback and orders.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        account: 회원 계정 (Member account, unique)
        username: 회원 이름 (Display name)
        email: 이메일 (Optional)
        phone: 전화번호 (Optional)
        is_active: 활성 상태 (Active status)
    """

    __tablename__ = "members"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    account: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
