"""공지 라우터 — 매장 공지 API.

Announcement Router — Search, display-window listing and CRUD for store
announcements. Every endpoint requires a signed-in employee; writes are
limited to the employee's own store except for headquarters admins.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.deps import get_current_session
from backoffice.database import get_db
from backoffice.models.enums import AnnouncementStatus
from backoffice.models.session import EmployeeSession
from backoffice.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementResponse,
    AnnouncementUpdate,
)
from backoffice.schemas.common import MessageResponse
from backoffice.services.announcement_service import announcement_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[AnnouncementResponse])
async def search_announcements(
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
    title: str | None = None,
    status: AnnouncementStatus | None = None,
    start_time: datetime | None = None,
    end_time: datetime | None = None,
) -> list[dict]:
    """공지를 검색합니다. 생략한 조건은 무시됩니다.

    Search announcements by optional title substring, status, and window bounds.
    """
    announcements = await announcement_service.search(db, title, status, start_time, end_time)
    return [await announcement_service.build_response(db, a) for a in announcements]


@router.get("/active", response_model=list[AnnouncementResponse])
async def list_active_announcements(
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> list[dict]:
    """현재 게시 중인 공지 (Announcements currently on display)."""
    announcements = await announcement_service.list_currently_active(db)
    return [await announcement_service.build_response(db, a) for a in announcements]


@router.get("/stores/{store_id}", response_model=list[AnnouncementResponse])
async def list_store_announcements(
    store_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> list[dict]:
    """매장 공지 목록 (Announcements of a store)."""
    announcements = await announcement_service.list_for_store(db, store_id)
    return [await announcement_service.build_response(db, a) for a in announcements]


@router.get("/{announcement_id}", response_model=AnnouncementResponse)
async def get_announcement(
    announcement_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> dict:
    """공지 상세를 조회합니다.

    Get announcement detail.
    """
    announcement = await announcement_service.get_detail(db, announcement_id)
    return await announcement_service.build_response(db, announcement)


@router.post("", response_model=AnnouncementResponse, status_code=201)
async def create_announcement(
    data: AnnouncementCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> dict:
    """새 공지를 생성합니다. 작성자와 매장은 로그인 직원 기준.

    Create an announcement authored by the signed-in employee.
    """
    announcement = await announcement_service.create(db, data, current)
    await db.commit()

    return await announcement_service.build_response(db, announcement)


@router.put("/{announcement_id}", response_model=AnnouncementResponse)
async def update_announcement(
    announcement_id: UUID,
    data: AnnouncementUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> dict:
    """공지를 수정합니다.

    Update an announcement.
    """
    announcement = await announcement_service.update(db, announcement_id, data, current)
    await db.commit()

    return await announcement_service.build_response(db, announcement)


@router.delete("/{announcement_id}", response_model=MessageResponse)
async def delete_announcement(
    announcement_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> dict:
    """공지를 삭제합니다 (Delete an announcement)."""
    await announcement_service.delete(db, announcement_id, current)
    await db.commit()
    return {"message": "Announcement deleted"}
