"""고객 의견 라우터 — 회원/매장별 의견 조회 API.

Feedback Router — Read-only feedback listings by member and by store.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.deps import get_current_session
from backoffice.database import get_db
from backoffice.models.feedback import Feedback
from backoffice.models.session import EmployeeSession
from backoffice.repositories.feedback_repository import feedback_repository
from backoffice.schemas.common import FeedbackResponse

router: APIRouter = APIRouter()


def _build_response(feedback: Feedback) -> dict:
    return {
        "id": str(feedback.id),
        "member_id": str(feedback.member_id),
        "store_id": str(feedback.store_id),
        "phone": feedback.phone,
        "dining_time": feedback.dining_time,
        "content": feedback.content,
        "status": feedback.status,
        "reply": feedback.reply,
        "handled_by": str(feedback.handled_by) if feedback.handled_by else None,
        "created_at": feedback.created_at,
    }


@router.get("/members/{member_id}", response_model=list[FeedbackResponse])
async def list_member_feedbacks(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> list[dict]:
    """회원이 남긴 의견 목록 (Feedback written by a member, newest first)."""
    feedbacks = await feedback_repository.find_by_member_id(db, member_id)
    return [_build_response(f) for f in feedbacks]


@router.get("/stores/{store_id}", response_model=list[FeedbackResponse])
async def list_store_feedbacks(
    store_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> list[dict]:
    """매장에 접수된 의견 목록 (Feedback received by a store, newest first)."""
    feedbacks = await feedback_repository.find_by_store_id(db, store_id)
    return [_build_response(f) for f in feedbacks]
