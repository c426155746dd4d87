"""주문 상세 라우터 — 주문/회원별 주문 상세 및 리뷰 대상 조회 API.

Order Line Item Router — Line items by order and by member, optionally
filtered by review stars, plus the reviewable list and per-member count.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.deps import get_current_session
from backoffice.database import get_db
from backoffice.models.order import OrderList, OrderListInfo
from backoffice.models.session import EmployeeSession
from backoffice.repositories.order_list_info_repository import order_list_info_repository
from backoffice.schemas.common import CountResponse, OrderListInfoResponse
from backoffice.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


def _build_response(item: OrderListInfo) -> dict:
    return {
        "id": str(item.id),
        "order_list_id": str(item.order_list_id),
        "meal_name": item.meal_name,
        "meal_price": item.meal_price,
        "quantity": item.quantity,
        "meal_customization": item.meal_customization,
        "review_stars": item.review_stars,
    }


@router.get("/orders/{order_list_id}", response_model=list[OrderListInfoResponse])
async def list_order_items(
    order_list_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
    review_stars: Annotated[int | None, Query(ge=0, le=5)] = None,
) -> list[dict]:
    """주문의 상세 목록, review_stars 지정 시 해당 평점만.

    Line items of an order, optionally only those with ``review_stars``.
    """
    order_list: OrderList | None = await db.get(OrderList, order_list_id)
    if order_list is None:
        raise NotFoundError("Order not found")

    if review_stars is None:
        items = await order_list_info_repository.find_by_order_list(db, order_list)
    else:
        items = await order_list_info_repository.find_by_order_list_and_review_stars(
            db, order_list, review_stars
        )
    return [_build_response(i) for i in items]


@router.get("/members/{member_id}", response_model=list[OrderListInfoResponse])
async def list_member_items(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
    review_stars: Annotated[int | None, Query(ge=0, le=5)] = None,
) -> list[dict]:
    """회원의 주문 상세 목록 (최근 주문 순).

    Line items across a member's orders, newest order first.
    """
    if review_stars is None:
        items = await order_list_info_repository.find_by_member_id(db, member_id)
    else:
        items = await order_list_info_repository.find_by_member_id_and_review_stars(
            db, member_id, review_stars
        )
    return [_build_response(i) for i in items]


@router.get("/members/{member_id}/reviewable", response_model=list[OrderListInfoResponse])
async def list_reviewable_items(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> list[dict]:
    """리뷰 가능한 주문 상세 (Completed-order items not yet reviewed)."""
    items = await order_list_info_repository.find_reviewable_by_member_id(db, member_id)
    return [_build_response(i) for i in items]


@router.get("/members/{member_id}/count", response_model=CountResponse)
async def count_member_items(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> dict:
    """회원의 주문 상세 개수 (Number of line items across a member's orders)."""
    return {"count": await order_list_info_repository.count_by_member_id(db, member_id)}
