"""매장 공지 SQLAlchemy ORM 모델 정의.

Store announcement SQLAlchemy ORM model definition.
Each store publishes its own announcements within a display window.

Tables:
    - announcements: 매장별 공지 (Store-specific announcements)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.database import Base
from backoffice.models.enums import AnnouncementStatus


class Announcement(Base):
    """공지 모델 — 매장 단위 공지사항.

    Announcement model — Notice published by a store for its display window
    [start_time, end_time]. Title/content/time rules are enforced by
    ``AnnouncementCreate``/``AnnouncementUpdate`` schemas.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        title: 공지 제목 (Title, max 50 chars)
        content: 공지 내용 (Body, max 5000 chars)
        start_time: 게시 시작 일시 (Display window start)
        end_time: 게시 종료 일시 (Display window end)
        status: 게시 상태 (Publish status)
        employee_id: 작성 직원 FK (Author employee)
        store_id: 소속 매장 FK (Owning store)
        created_at: 생성 일시 — 생성 시에만 기록 (Written once on insert)
        updated_at: 수정 일시 (Last update timestamp)
    """

    __tablename__ = "announcements"

    # 공지 고유 식별자 — Announcement unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 공지 제목 — Announcement title
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    # 공지 내용 — Announcement body
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # 게시 시작 일시 — Display window start (UTC)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # 게시 종료 일시 — Display window end (UTC)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # 게시 상태 — Publish status
    status: Mapped[AnnouncementStatus] = mapped_column(
        Enum(AnnouncementStatus, native_enum=False, length=20), nullable=False
    )
    # 작성 직원 FK — Author employee
    employee_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("employees.id"), nullable=False)
    # 소속 매장 FK — Owning store (CASCADE: 매장 삭제 시 공지도 삭제)
    store_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False)
    # 생성 일시 — Record creation timestamp (UTC, 수정 불가)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    employee = relationship("Employee")
    store = relationship("Store", back_populates="announcements")

    def __repr__(self) -> str:
        return f"<Announcement id={self.id} title={self.title!r} store_id={self.store_id} status={self.status}>"
