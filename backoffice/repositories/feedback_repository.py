"""고객 의견 레포지토리.

Feedback Repository — Member and store finders for customer feedback.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.feedback import Feedback
from backoffice.repositories.base import BaseRepository


class FeedbackRepository(BaseRepository[Feedback]):
    """고객 의견 레포지토리 (Feedback repository)."""

    def __init__(self) -> None:
        super().__init__(Feedback)

    async def find_by_member_id(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Sequence[Feedback]:
        """회원이 작성한 의견을 최신순으로 조회합니다."""
        query: Select = (
            select(Feedback)
            .where(Feedback.member_id == member_id)
            .order_by(Feedback.created_at.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def find_by_store_id(
        self,
        db: AsyncSession,
        store_id: UUID,
    ) -> Sequence[Feedback]:
        """매장에 대한 의견을 최신순으로 조회합니다."""
        query: Select = (
            select(Feedback)
            .where(Feedback.store_id == store_id)
            .order_by(Feedback.created_at.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
feedback_repository: FeedbackRepository = FeedbackRepository()
