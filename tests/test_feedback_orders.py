"""고객 의견 및 주문 상세 테스트 — 레포지토리 조회와 조회 API.

Feedback and order line item tests — Repository finders and read API.
"""

from datetime import timedelta

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.enums import FeedbackStatus
from backoffice.repositories.feedback_repository import feedback_repository
from backoffice.repositories.order_list_info_repository import order_list_info_repository
from backoffice.utils.clock import utc_now
from tests.conftest import sign_in

FEEDBACKS = "/api/v1/feedbacks"
ITEMS = "/api/v1/order-list-infos"


@pytest_asyncio.fixture
async def feedbacks(db: AsyncSession, member, store, other_store, manager):
    """매장별 의견을 생성합니다."""
    from backoffice.models.feedback import Feedback
    now = utc_now()
    rows = [
        Feedback(member_id=member.id, store_id=store.id, content="Fries were cold.",
                 dining_time=now - timedelta(days=3), created_at=now - timedelta(days=3)),
        Feedback(member_id=member.id, store_id=store.id, content="Great service!",
                 status=FeedbackStatus.RESOLVED, reply="Thank you!", handled_by=manager.id,
                 created_at=now - timedelta(days=1)),
        Feedback(member_id=member.id, store_id=other_store.id, content="Long queue.",
                 created_at=now - timedelta(hours=2)),
    ]
    db.add_all(rows)
    await db.commit()
    return rows


class TestFeedback:
    """고객 의견 테스트."""

    async def test_repository_finders(self, db: AsyncSession, feedbacks, member, store):
        """회원/매장별 조회 — 최신순."""
        by_member = await feedback_repository.find_by_member_id(db, member.id)
        assert [f.content for f in by_member] == ["Long queue.", "Great service!", "Fries were cold."]

        by_store = await feedback_repository.find_by_store_id(db, store.id)
        assert [f.content for f in by_store] == ["Great service!", "Fries were cold."]

    async def test_store_endpoint(self, client: AsyncClient, db: AsyncSession, staff, store, feedbacks, manager):
        """매장 의견 API."""
        await sign_in(client, db, staff)
        res = await client.get(f"{FEEDBACKS}/stores/{store.id}")
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 2
        assert data[0]["status"] == "RESOLVED"
        assert data[0]["handled_by"] == str(manager.id)

    async def test_member_endpoint_requires_session(self, client: AsyncClient, member):
        """세션 없이 호출 → 401."""
        res = await client.get(f"{FEEDBACKS}/members/{member.id}")
        assert res.status_code == 401


class TestOrderListInfoRepository:
    """주문 상세 레포지토리 테스트."""

    async def test_unreviewed_null_is_kept(self, db: AsyncSession, orders):
        """평점 NULL은 0으로 바뀌지 않고 그대로 저장."""
        db.expire_all()
        items = await order_list_info_repository.find_by_order_list(db, orders["completed"])
        stars = {i.meal_name: i.review_stars for i in items}
        assert stars["Iced Tea"] is None
        assert stars["Kimchi Fries"] == 0

    async def test_find_by_order_list(self, db: AsyncSession, orders):
        """주문별 상세 조회 및 평점 조건."""
        completed = orders["completed"]
        items = await order_list_info_repository.find_by_order_list(db, completed)
        assert len(items) == 3

        same = await order_list_info_repository.find_by_order_list_id(db, completed.id)
        assert [i.id for i in same] == [i.id for i in items]

        five = await order_list_info_repository.find_by_order_list_and_review_stars(db, completed, 5)
        assert [i.meal_name for i in five] == ["Bulgogi Burger"]

    async def test_find_by_member_newest_order_first(self, db: AsyncSession, orders, member):
        """회원별 조회 — 최근 주문 먼저."""
        items = await order_list_info_repository.find_by_member_id(db, member.id)
        assert len(items) == 4
        assert items[0].meal_name == "Bibimbap"

        zero = await order_list_info_repository.find_by_member_id_and_review_stars(db, member.id, 0)
        assert {i.meal_name for i in zero} == {"Kimchi Fries", "Bibimbap"}

    async def test_reviewable_only_completed_and_unreviewed(self, db: AsyncSession, orders, member):
        """리뷰 대상 — 완료 주문, 평점 0 또는 NULL."""
        items = await order_list_info_repository.find_reviewable_by_member_id(db, member.id)
        assert {i.meal_name for i in items} == {"Kimchi Fries", "Iced Tea"}

    async def test_count_by_member(self, db: AsyncSession, orders, member):
        """회원 주문 상세 개수."""
        assert await order_list_info_repository.count_by_member_id(db, member.id) == 4


class TestOrderListInfoApi:
    """주문 상세 API 테스트."""

    async def test_order_items_with_stars(self, client: AsyncClient, db: AsyncSession, staff, orders):
        """주문 상세 API — review_stars 필터."""
        await sign_in(client, db, staff)
        order_id = orders["completed"].id

        res = await client.get(f"{ITEMS}/orders/{order_id}")
        assert res.status_code == 200
        assert len(res.json()) == 3

        res = await client.get(f"{ITEMS}/orders/{order_id}", params={"review_stars": 5})
        assert [i["meal_name"] for i in res.json()] == ["Bulgogi Burger"]

    async def test_unknown_order(self, client: AsyncClient, db: AsyncSession, staff):
        """존재하지 않는 주문 → 404."""
        await sign_in(client, db, staff)
        res = await client.get(f"{ITEMS}/orders/00000000-0000-0000-0000-000000000000")
        assert res.status_code == 404

    async def test_member_endpoints(self, client: AsyncClient, db: AsyncSession, staff, orders, member):
        """회원 상세/리뷰 대상/개수 API."""
        await sign_in(client, db, staff)

        res = await client.get(f"{ITEMS}/members/{member.id}", params={"review_stars": 0})
        assert {i["meal_name"] for i in res.json()} == {"Kimchi Fries", "Bibimbap"}

        res = await client.get(f"{ITEMS}/members/{member.id}/reviewable")
        assert {i["meal_name"] for i in res.json()} == {"Kimchi Fries", "Iced Tea"}

        res = await client.get(f"{ITEMS}/members/{member.id}/count")
        assert res.json() == {"count": 4}

    async def test_review_stars_out_of_range(self, client: AsyncClient, db: AsyncSession, staff, member):
        """평점 범위 밖 → 422."""
        await sign_in(client, db, staff)
        res = await client.get(f"{ITEMS}/members/{member.id}", params={"review_stars": 6})
        assert res.status_code == 422
