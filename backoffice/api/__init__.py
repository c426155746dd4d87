"""JSON API 라우터 패키지 — 모든 /api/v1 엔드포인트 통합.

JSON API router package — Aggregates the session-protected endpoints
into a single router mounted under ``/api/v1``.

Included routers:
    - announcements: 매장 공지 (Store announcements)
    - feedbacks: 고객 의견 조회 (Feedback listings)
    - order_list_infos: 주문 상세 조회 (Order line items and reviews)
    - employees: 로그인 직원 정보 및 잠금 해제 (Current employee, unlock)
"""

from fastapi import APIRouter

from backoffice.api.announcements import router as announcements_router
from backoffice.api.employees import router as employees_router
from backoffice.api.feedbacks import router as feedbacks_router
from backoffice.api.order_list_infos import router as order_list_infos_router

api_router: APIRouter = APIRouter()

api_router.include_router(announcements_router, prefix="/announcements", tags=["Announcements"])
api_router.include_router(feedbacks_router, prefix="/feedbacks", tags=["Feedbacks"])
api_router.include_router(order_list_infos_router, prefix="/order-list-infos", tags=["Order List Infos"])
api_router.include_router(employees_router, prefix="/employees", tags=["Employees"])
