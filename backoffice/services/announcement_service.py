"""공지 서비스 — 매장 공지 비즈니스 로직.

Announcement Service — Business logic for store announcements: search,
display-window queries and CRUD. Writes are scoped to the signed-in
employee's store unless the employee is a headquarters admin.
"""

import logging
from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.announcement import Announcement
from backoffice.models.employee import Employee
from backoffice.models.enums import AnnouncementStatus, EmployeeRole
from backoffice.models.session import EmployeeSession
from backoffice.repositories.announcement_repository import announcement_repository
from backoffice.repositories.store_repository import store_repository
from backoffice.schemas.announcement import AnnouncementCreate, AnnouncementUpdate
from backoffice.utils.clock import as_utc
from backoffice.utils.exceptions import BadRequestError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class AnnouncementService:
    """공지 서비스.

    Announcement service providing search and store-scoped CRUD.
    """

    def _scope(self, current: EmployeeSession) -> UUID | None:
        """쓰기 범위 매장 — 본사 관리자는 전체 (Store scope for writes; None = all stores)."""
        if current.employee_role == EmployeeRole.HEADQUARTERS_ADMIN:
            return None
        return current.store_id

    async def build_response(
        self,
        db: AsyncSession,
        announcement: Announcement,
    ) -> dict:
        """공지 응답 딕셔너리를 구성합니다 (작성자 이름 포함).

        Build the announcement response dict with the author's name.
        """
        result = await db.execute(
            select(Employee.username).where(Employee.id == announcement.employee_id)
        )
        employee_name: str | None = result.scalar()

        return {
            "id": str(announcement.id),
            "title": announcement.title,
            "content": announcement.content,
            "start_time": announcement.start_time,
            "end_time": announcement.end_time,
            "status": announcement.status,
            "employee_id": str(announcement.employee_id),
            "employee_name": employee_name,
            "store_id": str(announcement.store_id),
            "created_at": announcement.created_at,
        }

    async def search(
        self,
        db: AsyncSession,
        title: str | None = None,
        status: AnnouncementStatus | None = None,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
    ) -> Sequence[Announcement]:
        """선택 조건으로 공지를 검색합니다 (None 조건은 무시).

        Search announcements; a None parameter is ignored and a blank title
        counts as None.
        """
        if title is not None and not title.strip():
            title = None
        return await announcement_repository.search(db, title, status, start_time, end_time)

    async def list_for_store(
        self,
        db: AsyncSession,
        store_id: UUID,
    ) -> Sequence[Announcement]:
        """매장 공지 목록 (Announcements of a store)."""
        return await announcement_repository.find_by_store_id(db, store_id)

    async def list_currently_active(self, db: AsyncSession) -> Sequence[Announcement]:
        """현재 게시 중인 공지 (ACTIVE announcements whose window contains now)."""
        return await announcement_repository.find_currently_active(db)

    async def get_detail(
        self,
        db: AsyncSession,
        announcement_id: UUID,
    ) -> Announcement:
        """공지 상세를 조회합니다.

        Get an announcement.

        Raises:
            NotFoundError: 공지가 없을 때 (When announcement not found)
        """
        announcement: Announcement | None = await announcement_repository.get_by_id(
            db, announcement_id
        )
        if announcement is None:
            raise NotFoundError("Announcement not found")
        return announcement

    async def create(
        self,
        db: AsyncSession,
        data: AnnouncementCreate,
        current: EmployeeSession,
    ) -> Announcement:
        """새 공지를 생성합니다.

        Create an announcement authored by the signed-in employee. The store
        defaults to the employee's store.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 공지 생성 데이터 (Announcement creation data)
            current: 로그인 세션 (Signed-in employee session)

        Returns:
            Announcement: 생성된 공지 (Created announcement)

        Raises:
            NotFoundError: 매장이 없을 때 (When store not found)
            ForbiddenError: 다른 매장에 작성하려 할 때 (Writing to another store)
        """
        store_id: UUID = UUID(data.store_id) if data.store_id else current.store_id

        scope: UUID | None = self._scope(current)
        if scope is not None and store_id != scope:
            raise ForbiddenError("You can only publish announcements for your own store")
        if not await store_repository.exists(db, {"id": store_id}):
            raise NotFoundError("Store not found")

        announcement: Announcement = await announcement_repository.create(
            db,
            {
                "title": data.title.strip(),
                "content": data.content,
                "start_time": data.start_time,
                "end_time": data.end_time,
                "status": data.status,
                "employee_id": current.employee_id,
                "store_id": store_id,
            },
        )
        logger.info("Announcement %s created by %s", announcement.id, current.employee_account)
        return announcement

    async def update(
        self,
        db: AsyncSession,
        announcement_id: UUID,
        data: AnnouncementUpdate,
        current: EmployeeSession,
    ) -> Announcement:
        """공지를 수정합니다 (부분 업데이트).

        Update an announcement. The resulting window must still end after it
        starts.

        Raises:
            NotFoundError: 공지가 없거나 범위 밖일 때 (Not found or outside scope)
            BadRequestError: 종료 일시가 시작 일시보다 이르거나 같을 때
                             (End time not after start time)
        """
        scope: UUID | None = self._scope(current)
        announcement: Announcement | None = await announcement_repository.get_by_id(
            db, announcement_id, scope
        )
        if announcement is None:
            raise NotFoundError("Announcement not found")

        update_data: dict = data.model_dump(exclude_unset=True)
        for key in ("title", "content", "start_time", "end_time", "status"):
            if key in update_data and update_data[key] is None:
                del update_data[key]

        start: datetime = update_data.get("start_time", announcement.start_time)
        end: datetime = update_data.get("end_time", announcement.end_time)
        if as_utc(end) <= as_utc(start):
            raise BadRequestError("End time must be after start time")

        updated: Announcement | None = await announcement_repository.update(
            db, announcement_id, update_data, scope
        )
        if updated is None:
            raise NotFoundError("Announcement not found")
        return updated

    async def delete(
        self,
        db: AsyncSession,
        announcement_id: UUID,
        current: EmployeeSession,
    ) -> bool:
        """공지를 삭제합니다.

        Delete an announcement.

        Raises:
            NotFoundError: 공지가 없거나 범위 밖일 때 (Not found or outside scope)
        """
        deleted: bool = await announcement_repository.delete(
            db, announcement_id, self._scope(current)
        )
        if not deleted:
            raise NotFoundError("Announcement not found")
        logger.info("Announcement %s deleted by %s", announcement_id, current.employee_account)
        return deleted


# 싱글턴 인스턴스 — Singleton instance
announcement_service: AnnouncementService = AnnouncementService()
