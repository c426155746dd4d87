"""도메인 상태/역할 열거형 정의.

Domain status and role enumerations shared by models, schemas and services.
Stored in the database by name (VARCHAR, non-native enum).
"""

import enum


class AccountStatus(str, enum.Enum):
    """직원 계정 상태 (Employee account status)."""

    ACTIVE = "ACTIVE"  # 정상 사용 가능 (Can sign in)
    INACTIVE = "INACTIVE"  # 정지됨 — 관리자 정지 또는 로그인 실패 잠금 (Disabled or locked out)


class EmployeeRole(str, enum.Enum):
    """직원 역할 (Employee role)."""

    HEADQUARTERS_ADMIN = "HEADQUARTERS_ADMIN"  # 본사 관리자 (Chain headquarters admin)
    MANAGER = "MANAGER"  # 매장 매니저 (Store manager)
    STAFF = "STAFF"  # 매장 직원 (Store staff)


class StoreStatus(str, enum.Enum):
    """매장 영업 상태 (Store operating status)."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class AnnouncementStatus(str, enum.Enum):
    """공지 게시 상태 (Announcement publish status)."""

    INACTIVE = "INACTIVE"  # 내림 (Unpublished)
    ACTIVE = "ACTIVE"  # 게시 (Published)


class FeedbackStatus(str, enum.Enum):
    """고객 의견 처리 상태 (Customer feedback handling status)."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    RESOLVED = "RESOLVED"


class OrderStatus(str, enum.Enum):
    """주문 진행 상태 (Order progress status)."""

    PENDING = "PENDING"
    PREPARING = "PREPARING"
    READY = "READY"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
