"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions.
Includes feedback, order line item, count and generic message responses.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from backoffice.models.enums import FeedbackStatus


class MessageResponse(BaseModel):
    """일반 메시지 응답 (Generic message response)."""

    message: str


class CountResponse(BaseModel):
    """개수 응답 (Count response)."""

    count: int


class FeedbackResponse(BaseModel):
    """고객 의견 응답 스키마 (Feedback response)."""

    id: str
    member_id: str
    store_id: str
    phone: str | None = None
    dining_time: datetime | None = None
    content: str
    status: FeedbackStatus
    reply: str | None = None
    handled_by: str | None = None
    created_at: datetime


class OrderListInfoResponse(BaseModel):
    """주문 상세 응답 스키마.

    Order line item response. review_stars of 0 or None means not reviewed.
    """

    id: str
    order_list_id: str
    meal_name: str
    meal_price: Decimal
    quantity: int
    meal_customization: str | None = None
    review_stars: int | None = None
