"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    enums: 상태/역할 열거형 (Status and role enumerations)
    store: 매장 (Store)
    employee: 직원 계정 (Employee accounts)
    member: 회원 (Members / customers)
    announcement: 매장 공지 (Store announcements)
    feedback: 고객 의견 (Customer feedback)
    order: 주문 및 주문 상세 (Orders and order line items)
    session: 직원 로그인 세션 (Employee sign-in sessions)
"""

from backoffice.models.store import Store
from backoffice.models.employee import Employee
from backoffice.models.member import Member
from backoffice.models.announcement import Announcement
from backoffice.models.feedback import Feedback
from backoffice.models.order import OrderList, OrderListInfo
from backoffice.models.session import EmployeeSession

__all__ = [
    "Store",
    "Employee",
    "Member",
    "Announcement",
    "Feedback",
    "OrderList", "OrderListInfo",
    "EmployeeSession",
]
