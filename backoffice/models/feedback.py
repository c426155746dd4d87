"""고객 의견 SQLAlchemy ORM 모델 정의.

Customer feedback SQLAlchemy ORM model definition.

Tables:
    - feedbacks: 회원이 매장에 남긴 의견 (Feedback left by members for stores)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.database import Base
from backoffice.models.enums import FeedbackStatus


class Feedback(Base):
    """고객 의견 모델.

    Feedback model — A member's comment about a visit to a store,
    optionally answered by an employee.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        member_id: 작성 회원 FK (Member who wrote it)
        store_id: 대상 매장 FK (Store it concerns)
        phone: 연락처 (Contact phone, optional)
        dining_time: 식사 일시 (Visit time, optional)
        content: 의견 내용 (Body text)
        status: 처리 상태 (Handling status)
        reply: 답변 (Employee reply, optional)
        handled_by: 처리 직원 FK (Employee who handled it, optional)
    """

    __tablename__ = "feedbacks"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 작성 회원 FK — CASCADE: 회원 삭제 시 의견도 삭제
    member_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("members.id", ondelete="CASCADE"), nullable=False)
    # 대상 매장 FK — CASCADE: 매장 삭제 시 의견도 삭제
    store_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    dining_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[FeedbackStatus] = mapped_column(
        Enum(FeedbackStatus, native_enum=False, length=20), nullable=False, default=FeedbackStatus.PENDING
    )
    reply: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 처리 직원 FK — SET NULL: 직원 삭제 시 처리자 비움
    handled_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
