"""공지 레포지토리 — 매장 공지 관련 DB 쿼리 담당.

Announcement Repository — Handles store announcement queries:
status/store/author finders, display-window lookups, and the
optional-parameter search.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.announcement import Announcement
from backoffice.models.enums import AnnouncementStatus
from backoffice.repositories.base import BaseRepository
from backoffice.utils.clock import utc_now


class AnnouncementRepository(BaseRepository[Announcement]):
    """공지 레포지토리.

    Announcement repository with finder methods and dynamic search.

    Extends:
        BaseRepository[Announcement]
    """

    def __init__(self) -> None:
        super().__init__(Announcement)

    async def find_by_status(
        self,
        db: AsyncSession,
        status: AnnouncementStatus,
    ) -> Sequence[Announcement]:
        """게시 상태로 공지를 조회합니다 (Announcements with the given status)."""
        query: Select = (
            select(Announcement)
            .where(Announcement.status == status)
            .order_by(Announcement.start_time.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def find_by_start_time_before_and_end_time_after(
        self,
        db: AsyncSession,
        start_before: datetime,
        end_after: datetime,
    ) -> Sequence[Announcement]:
        """게시 기간 조건으로 공지를 조회합니다.

        Announcements with ``start_time < start_before`` and ``end_time > end_after``.
        Passing the same instant twice yields announcements whose window
        contains that instant (regardless of status).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            start_before: 시작 일시 상한 (Exclusive upper bound for start_time)
            end_after: 종료 일시 하한 (Exclusive lower bound for end_time)

        Returns:
            Sequence[Announcement]: 공지 목록 (Matching announcements)
        """
        query: Select = (
            select(Announcement)
            .where(
                Announcement.start_time < start_before,
                Announcement.end_time > end_after,
            )
            .order_by(Announcement.start_time.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def find_by_store_id(
        self,
        db: AsyncSession,
        store_id: UUID,
    ) -> Sequence[Announcement]:
        """매장 공지를 조회합니다 (Announcements of a store, newest first)."""
        query: Select = (
            select(Announcement)
            .where(Announcement.store_id == store_id)
            .order_by(Announcement.created_at.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def find_by_employee_id(
        self,
        db: AsyncSession,
        employee_id: UUID,
    ) -> Sequence[Announcement]:
        """작성 직원 기준으로 공지를 조회합니다 (Announcements written by an employee)."""
        query: Select = (
            select(Announcement)
            .where(Announcement.employee_id == employee_id)
            .order_by(Announcement.created_at.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def search(
        self,
        db: AsyncSession,
        title: str | None = None,
        status: AnnouncementStatus | None = None,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
    ) -> Sequence[Announcement]:
        """선택 조건으로 공지를 검색합니다.

        Search announcements; every parameter left as None is ignored.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            title: 제목 부분 일치 (Substring of the title)
            status: 게시 상태 (Exact status)
            start_time: 시작 일시 하한, 이상 (start_time >= value)
            end_time: 종료 일시 상한, 이하 (end_time <= value)

        Returns:
            Sequence[Announcement]: 검색 결과 (Matching announcements)
        """
        query: Select = select(Announcement)

        # 조건이 None이면 해당 조건을 건너뜀 — Skip a predicate when its value is None
        if title is not None:
            query = query.where(Announcement.title.contains(title, autoescape=True))
        if status is not None:
            query = query.where(Announcement.status == status)
        if start_time is not None:
            query = query.where(Announcement.start_time >= start_time)
        if end_time is not None:
            query = query.where(Announcement.end_time <= end_time)

        query = query.order_by(Announcement.start_time.desc())
        result = await db.execute(query)
        return result.scalars().all()

    async def find_currently_active(
        self,
        db: AsyncSession,
        status: AnnouncementStatus = AnnouncementStatus.ACTIVE,
        now: datetime | None = None,
    ) -> Sequence[Announcement]:
        """현재 게시 중인 공지를 조회합니다.

        Announcements with the given status whose window contains ``now``
        (``start_time <= now <= end_time``).
        """
        now = now or utc_now()
        query: Select = (
            select(Announcement)
            .where(
                Announcement.status == status,
                Announcement.start_time <= now,
                Announcement.end_time >= now,
            )
            .order_by(Announcement.start_time.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
announcement_repository: AnnouncementRepository = AnnouncementRepository()
