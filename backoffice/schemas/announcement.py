"""공지 관련 Pydantic 요청/응답 스키마 정의.

Announcement Pydantic request/response schema definitions.
Enforces title/content limits and the display-window rules.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from backoffice.models.enums import AnnouncementStatus
from backoffice.utils.clock import as_utc, utc_now


def _not_blank(value: str | None, message: str) -> str | None:
    if value is not None and not value.strip():
        raise ValueError(message)
    return value


def _in_future(value: datetime | None) -> datetime | None:
    if value is not None and as_utc(value) <= utc_now():
        raise ValueError("End time must be in the future")
    return value


class AnnouncementCreate(BaseModel):
    """공지 생성 요청 스키마.

    Announcement creation request schema.
    store_id defaults to the signed-in employee's store when omitted.

    Attributes:
        title: 공지 제목 (Title, 1~50 chars, not blank)
        content: 공지 내용 (Body, 1~5000 chars, not blank)
        start_time: 게시 시작 일시 (Display window start)
        end_time: 게시 종료 일시 (Display window end, must be future and after start)
        status: 게시 상태 (Publish status)
        store_id: 대상 매장 UUID (Target store, optional)
    """

    title: str = Field(..., max_length=50)
    content: str = Field(..., max_length=5000)
    start_time: datetime
    end_time: datetime
    status: AnnouncementStatus
    store_id: str | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _not_blank(value, "Title must not be blank")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        return _not_blank(value, "Content must not be blank")

    @field_validator("end_time")
    @classmethod
    def end_time_in_future(cls, value: datetime) -> datetime:
        return _in_future(value)

    @model_validator(mode="after")
    def window_order(self) -> "AnnouncementCreate":
        if as_utc(self.end_time) <= as_utc(self.start_time):
            raise ValueError("End time must be after start time")
        return self


class AnnouncementUpdate(BaseModel):
    """공지 수정 요청 스키마 (부분 업데이트).

    Announcement update request schema (partial update). The window order
    against stored values is checked by the service.
    """

    title: str | None = Field(default=None, max_length=50)
    content: str | None = Field(default=None, max_length=5000)
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: AnnouncementStatus | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str | None) -> str | None:
        return _not_blank(value, "Title must not be blank")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str | None) -> str | None:
        return _not_blank(value, "Content must not be blank")

    @field_validator("end_time")
    @classmethod
    def end_time_in_future(cls, value: datetime | None) -> datetime | None:
        return _in_future(value)


class AnnouncementResponse(BaseModel):
    """공지 응답 스키마 (Announcement response)."""

    id: str
    title: str
    content: str
    start_time: datetime
    end_time: datetime
    status: AnnouncementStatus
    employee_id: str
    employee_name: str | None = None
    store_id: str
    created_at: datetime
