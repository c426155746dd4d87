"""매장 SQLAlchemy ORM 모델 정의.

Store SQLAlchemy ORM model definition.
Every employee, announcement, feedback and order belongs to a store.

Tables:
    - stores: 체인 매장 (Chain store locations)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.database import Base
from backoffice.models.enums import StoreStatus


class Store(Base):
    """매장 모델 — 체인의 개별 영업점.

    Store model — A single location of the restaurant chain.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 매장 이름 (Store name)
        address: 매장 주소 (Store address, optional)
        phone: 매장 전화번호 (Store phone, optional)
        status: 영업 상태 (Operating status)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        employees: 소속 직원 목록 (Employees working at this store)
        announcements: 매장 공지 목록 (Store announcements, cascade delete)
    """

    __tablename__ = "stores"

    # 매장 고유 식별자 — Store unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 매장 이름 — Store display name
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 매장 주소 — Physical address of the store (optional)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 매장 전화번호 — Store phone number (optional)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # 영업 상태 — Whether the store is operating
    status: Mapped[StoreStatus] = mapped_column(
        Enum(StoreStatus, native_enum=False, length=20), nullable=False, default=StoreStatus.ACTIVE
    )
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    employees = relationship("Employee", back_populates="store")
    announcements = relationship("Announcement", back_populates="store", cascade="all, delete-orphan")
