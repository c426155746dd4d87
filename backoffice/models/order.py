"""주문 SQLAlchemy ORM 모델 정의.

Order SQLAlchemy ORM model definitions.

Tables:
    - order_lists: 주문 헤더 (Order header: member, store, date, status)
    - order_list_infos: 주문 상세 (Order line items with meal review stars)
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.database import Base
from backoffice.models.enums import OrderStatus


class OrderList(Base):
    """주문 모델 — 회원의 한 번의 주문.

    Order header model — One order placed by a member at a store.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        member_id: 주문 회원 FK (Ordering member)
        store_id: 주문 매장 FK (Store fulfilling the order)
        order_date: 주문 일시 (Order timestamp)
        order_status: 주문 상태 (Order progress status)
        total_amount: 총 금액 (Order total)

    Relationships:
        member: 주문 회원 (Ordering member)
        items: 주문 상세 목록 (Line items, cascade delete)
    """

    __tablename__ = "order_lists"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("members.id"), nullable=False)
    store_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("stores.id"), nullable=False)
    # 주문 일시 — Order timestamp (UTC)
    order_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 주문 상태 — PENDING → PREPARING → READY → COMPLETED (또는 CANCELLED)
    order_status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20), nullable=False, default=OrderStatus.PENDING
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    member = relationship("Member")
    items = relationship("OrderListInfo", back_populates="order_list", cascade="all, delete-orphan")


class OrderListInfo(Base):
    """주문 상세 모델 — 주문 내 메뉴 한 줄.

    Order line item model — One meal within an order.
    ``review_stars`` of 0 or NULL means the member has not reviewed the meal yet.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        order_list_id: 주문 FK (Parent order)
        meal_name: 메뉴 이름 스냅샷 (Meal name at order time)
        meal_price: 메뉴 단가 스냅샷 (Unit price at order time)
        quantity: 수량 (Quantity, at least 1)
        meal_customization: 요청 사항 (Customization notes, optional)
        review_stars: 평점 0~5 (Review stars, 0/NULL = not reviewed)
    """

    __tablename__ = "order_list_infos"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 주문 FK — CASCADE: 주문 삭제 시 상세도 삭제
    order_list_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("order_lists.id", ondelete="CASCADE"), nullable=False)
    meal_name: Mapped[str] = mapped_column(String(100), nullable=False)
    meal_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    meal_customization: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 평점 — 0 또는 NULL이면 미평가 (0 or NULL = not reviewed yet)
    review_stars: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    order_list = relationship("OrderList", back_populates="items")
