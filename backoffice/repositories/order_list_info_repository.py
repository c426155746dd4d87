"""주문 상세 레포지토리 — 주문/회원 기준 주문 상세 조회.

Order line item Repository — Looks up order line items by order and by
member (through the parent order), including the "not yet reviewed" queries.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.enums import OrderStatus
from backoffice.models.order import OrderList, OrderListInfo
from backoffice.repositories.base import BaseRepository


class OrderListInfoRepository(BaseRepository[OrderListInfo]):
    """주문 상세 레포지토리.

    Order line item repository.

    Extends:
        BaseRepository[OrderListInfo]
    """

    def __init__(self) -> None:
        super().__init__(OrderListInfo)

    def _member_query(self, member_id: UUID) -> Select:
        """회원 주문 상세 기본 쿼리 — 주문 일시 내림차순.

        Base query joining the parent order, newest order first.
        """
        return (
            select(OrderListInfo)
            .join(OrderList, OrderList.id == OrderListInfo.order_list_id)
            .where(OrderList.member_id == member_id)
            .order_by(OrderList.order_date.desc())
        )

    async def find_by_order_list(
        self,
        db: AsyncSession,
        order_list: OrderList,
    ) -> Sequence[OrderListInfo]:
        """주문 객체로 주문 상세를 조회합니다 (Line items of an order)."""
        return await self.find_by_order_list_id(db, order_list.id)

    async def find_by_order_list_id(
        self,
        db: AsyncSession,
        order_list_id: UUID,
    ) -> Sequence[OrderListInfo]:
        """주문 ID로 주문 상세를 조회합니다.

        Line items of the order with the given id, in insertion order.
        """
        query: Select = (
            select(OrderListInfo)
            .where(OrderListInfo.order_list_id == order_list_id)
            .order_by(OrderListInfo.created_at)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def find_by_order_list_and_review_stars(
        self,
        db: AsyncSession,
        order_list: OrderList,
        review_stars: int,
    ) -> Sequence[OrderListInfo]:
        """주문 내 특정 평점의 상세를 조회합니다.

        Line items of an order with exactly ``review_stars`` (0 = not reviewed).
        """
        query: Select = (
            select(OrderListInfo)
            .where(
                OrderListInfo.order_list_id == order_list.id,
                OrderListInfo.review_stars == review_stars,
            )
            .order_by(OrderListInfo.created_at)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def find_by_member_id(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Sequence[OrderListInfo]:
        """회원의 모든 주문 상세를 주문 일시 내림차순으로 조회합니다."""
        result = await db.execute(self._member_query(member_id))
        return result.scalars().all()

    async def find_by_member_id_and_review_stars(
        self,
        db: AsyncSession,
        member_id: UUID,
        review_stars: int,
    ) -> Sequence[OrderListInfo]:
        """회원의 특정 평점 주문 상세를 조회합니다."""
        query: Select = self._member_query(member_id).where(
            OrderListInfo.review_stars == review_stars
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def find_reviewable_by_member_id(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Sequence[OrderListInfo]:
        """회원이 평가할 수 있는 주문 상세를 조회합니다.

        Line items whose order is COMPLETED and which have no review yet
        (stars 0 or NULL), newest order first.
        """
        query: Select = self._member_query(member_id).where(
            OrderList.order_status == OrderStatus.COMPLETED,
            or_(OrderListInfo.review_stars == 0, OrderListInfo.review_stars.is_(None)),
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def count_by_member_id(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> int:
        """회원의 주문 상세 개수를 셉니다 (Number of line items across a member's orders)."""
        query: Select = (
            select(func.count(OrderListInfo.id))
            .join(OrderList, OrderList.id == OrderListInfo.order_list_id)
            .where(OrderList.member_id == member_id)
        )
        return (await db.execute(query)).scalar() or 0


# 싱글턴 인스턴스 — Singleton instance
order_list_info_repository: OrderListInfoRepository = OrderListInfoRepository()
